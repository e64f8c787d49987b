"""scriptkit - project scaffolding and shared scripting helpers."""

__version__ = "0.1.0"
