"""Command-line interface for vtok."""
