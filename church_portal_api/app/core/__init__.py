"""Core infrastructure: settings, logging, errors and database access."""
