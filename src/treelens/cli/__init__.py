"""Command line interface for treelens."""
