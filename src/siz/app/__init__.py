"""Command line application layer."""
