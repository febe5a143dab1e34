"""Query client for the doh-resolver API."""

from dohresolver.client.client import DoHClient, normalize_name, parse_envelope

__all__ = ["DoHClient", "normalize_name", "parse_envelope"]
