"""PassGuard — password policy validation service and CLI."""

__version__ = "1.0.0"
