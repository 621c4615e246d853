"""Core traversal, classification and reporting."""
