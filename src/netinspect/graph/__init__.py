"""Derived views over a net: neighbors, colors, metadata and exports."""
