"""Rule table, configuration and logging helpers."""
