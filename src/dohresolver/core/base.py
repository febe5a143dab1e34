"""Abstract base class defining the resolver interface."""

from abc import ABC, abstractmethod

from dohresolver.core.models import MailExchange, RecordType


class BaseResolver(ABC):
    """Abstract base class for resolver backends.

    Implementations raise :class:`~dohresolver.core.exceptions.ResolutionError`
    for any lookup failure.
    """

    async def connect(self) -> None:
        """Prepare the backend."""

    async def disconnect(self) -> None:
        """Release backend resources."""

    @abstractmethod
    async def resolve(
        self, name: str, record_type: RecordType
    ) -> list[str | MailExchange]:
        """Forward lookup.

        MX lookups return :class:`MailExchange` items, all other types plain
        strings.
        """
        ...

    @abstractmethod
    async def reverse(self, ip: str) -> list[str]:
        """Reverse lookup of an IPv4 or IPv6 address."""
        ...
