"""Configuration commands (``loaddir config <command>``)."""
