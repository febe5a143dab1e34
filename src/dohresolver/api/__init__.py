"""HTTP API for doh-resolver."""
