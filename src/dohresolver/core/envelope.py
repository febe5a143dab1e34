"""Mapping between lookup requests, resolver results and the JSON envelope."""

import logging

from dohresolver.core.base import BaseResolver
from dohresolver.core.exceptions import QueryValidationError, ResolutionError
from dohresolver.core.models import (
    ANSWER_TTL,
    TYPE_CODES,
    AnswerRecord,
    DoHQuery,
    DoHResponse,
    MailExchange,
    RecordType,
)

logger = logging.getLogger(__name__)

SUPPORTED_TYPES = tuple(t.value for t in RecordType)


def parse_query(name: str | None, record_type: str | None = None) -> DoHQuery:
    """Validate raw query parameters.

    ``record_type`` defaults to ``A`` and must match a supported type exactly.
    ``name`` is passed through untouched.
    """
    if not name:
        raise QueryValidationError("The 'name' parameter is required.")

    if record_type is None:
        record_type = RecordType.A.value
    if record_type not in SUPPORTED_TYPES:
        raise QueryValidationError(f"Type '{record_type}' is not supported.")

    return DoHQuery(name=name, record_type=RecordType(record_type))


def build_answer(
    query: DoHQuery, records: list[str | MailExchange]
) -> list[AnswerRecord]:
    """Shape resolver output into Answer records, one per item."""
    code = TYPE_CODES[query.record_type]
    return [
        AnswerRecord(name=query.name, record_type=code, ttl=ANSWER_TTL, data=str(record))
        for record in records
    ]


async def answer_query(resolver: BaseResolver, query: DoHQuery) -> DoHResponse:
    """Run a single lookup and wrap the outcome in the envelope."""
    try:
        if query.record_type == RecordType.PTR:
            records: list[str | MailExchange] = list(await resolver.reverse(query.name))
        else:
            records = await resolver.resolve(query.name, query.record_type)
    except ResolutionError as e:
        logger.warning(f"Lookup failed for {query.name} ({query.record_type.value}): {e}")
        return DoHResponse.failure(str(e) or type(e).__name__)

    logger.debug(f"{query.name} ({query.record_type.value}): {len(records)} record(s)")
    return DoHResponse.success(build_answer(query, records))
