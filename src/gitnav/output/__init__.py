"""Terminal and JSON renderers."""
