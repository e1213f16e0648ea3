from expense_history.gui_viewers.app import main

if __name__ == "__main__":
    main()
