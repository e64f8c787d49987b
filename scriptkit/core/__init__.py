"""Shared scripting helpers: text blocks, command runner, disk, style."""
