"""Core runtime: configuration, monitoring loop, logging and theming."""
