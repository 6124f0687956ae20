"""Core functionality for the Entity Manager: configuration, errors and auth."""
