"""Command line interface for doh-resolver."""
