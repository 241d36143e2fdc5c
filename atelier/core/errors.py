"""
errors.py
---------
Exceptions raised while building a room from configuration.

Runtime operations never raise these; they log and reject instead.
"""


class ConfigurationError(Exception):
    """Room configuration is incomplete or inconsistent."""
    pass
