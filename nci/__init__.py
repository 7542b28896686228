"""Pick the right JavaScript package manager for a project and run its commands."""

__version__ = "0.2.1"