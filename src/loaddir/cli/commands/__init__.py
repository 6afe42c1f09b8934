"""Top-level loaddir commands (``loaddir <command>``)."""
