"""gitnav: numbered git status, add, reset, checkout, diff and branches."""

__version__ = "0.3.0"
