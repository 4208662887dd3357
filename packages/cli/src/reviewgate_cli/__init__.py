"""Command-line interface for the reviewgate approval gate."""
