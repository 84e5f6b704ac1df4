"""Precompute a static MCP surface (manifest, resources, tool results) from a resume document."""

__version__ = "0.1.0"
