"""Personal expense tracker: transaction history filtering, summaries and export."""

__version__ = "0.1.0"
