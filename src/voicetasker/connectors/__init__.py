"""Connectors: how user text reaches the core and replies reach the user."""
