"""Core: settings, exceptions, cache, security."""
