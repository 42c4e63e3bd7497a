"""Command line interface for SportFrei."""
