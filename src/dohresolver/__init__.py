"""doh-resolver - DNS lookups over a JSON HTTP API."""

__version__ = "0.1.0"
