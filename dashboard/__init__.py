"""Invoice dashboard form actions."""
