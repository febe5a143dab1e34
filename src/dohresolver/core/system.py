"""Resolver backend using the host's DNS configuration."""

import logging

import dns.asyncresolver
import dns.exception
import dns.resolver

from dohresolver.core.base import BaseResolver
from dohresolver.core.exceptions import ResolutionError
from dohresolver.core.models import MailExchange, RecordType

logger = logging.getLogger(__name__)


def _format_rdata(record_type: RecordType, rdata) -> str | MailExchange:
    """Convert a dnspython rdata into the value reported for ``record_type``."""
    if record_type in (RecordType.A, RecordType.AAAA):
        return rdata.address
    if record_type == RecordType.MX:
        return MailExchange(
            priority=rdata.preference,
            exchange=rdata.exchange.to_text(omit_final_dot=True),
        )
    if record_type == RecordType.TXT:
        return b"".join(rdata.strings).decode("utf-8", errors="replace")
    # CNAME, PTR
    return rdata.target.to_text(omit_final_dot=True)


class SystemResolver(BaseResolver):
    """Stub resolver backed by dnspython.

    Nameservers, timeout and retry behaviour come from the system resolver
    configuration (``/etc/resolv.conf`` or the platform equivalent) unless
    ``nameservers`` is given.
    """

    def __init__(self, nameservers: list[str] | None = None):
        self.nameservers = list(nameservers or [])
        self._resolver: dns.asyncresolver.Resolver | None = None

    async def connect(self) -> None:
        """Load the resolver configuration."""
        if self.nameservers:
            resolver = dns.asyncresolver.Resolver(configure=False)
            resolver.nameservers = self.nameservers
        else:
            try:
                resolver = dns.asyncresolver.Resolver()
            except dns.resolver.NoResolverConfiguration as e:
                logger.warning(f"No system resolver configuration: {e}")
                resolver = dns.asyncresolver.Resolver(configure=False)
        self._resolver = resolver
        logger.debug(f"Using nameservers: {', '.join(map(str, resolver.nameservers)) or 'none'}")

    async def disconnect(self) -> None:
        self._resolver = None

    @property
    def resolver(self) -> dns.asyncresolver.Resolver:
        if not self._resolver:
            raise RuntimeError("Resolver not connected. Call connect() first.")
        return self._resolver

    async def resolve(
        self, name: str, record_type: RecordType
    ) -> list[str | MailExchange]:
        """Forward lookup of ``name``."""
        try:
            answer = await self.resolver.resolve(name, record_type.value, search=False)
        except dns.exception.DNSException as e:
            raise ResolutionError.from_exception(e) from e

        return [_format_rdata(record_type, rdata) for rdata in answer]

    async def reverse(self, ip: str) -> list[str]:
        """Reverse lookup of ``ip`` through its in-addr.arpa / ip6.arpa name."""
        try:
            answer = await self.resolver.resolve_address(ip)
        except (dns.exception.DNSException, ValueError) as e:
            raise ResolutionError.from_exception(e) from e

        return [_format_rdata(RecordType.PTR, rdata) for rdata in answer]
