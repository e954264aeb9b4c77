"""Command implementations for yba-ctl."""
