"""Core - configuration, logging, metrics and dependency wiring."""
