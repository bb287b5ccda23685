"""Configuration: settings and themes."""
