from .app_config import DEFAULT_CONFIG, AppConfig
from .config_logging import LOGGING, configure_logging
from .converters_scalar import (
    format_currency,
    parse_date_maybe,
    parse_decimal_strict,
    to_date,
    to_decimal,
)
from .core_util import cell_text, is_null_or_whitespace, write_bytes_scoped

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG",
    "LOGGING",
    "configure_logging",
    "cell_text",
    "format_currency",
    "is_null_or_whitespace",
    "parse_date_maybe",
    "parse_decimal_strict",
    "to_date",
    "to_decimal",
    "write_bytes_scoped",
]
