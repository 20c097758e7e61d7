"""Git integration for the squash tool."""

from .operations import GitOperations

__all__ = ["GitOperations"]
