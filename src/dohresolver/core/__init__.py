"""Core library modules for DNS lookups."""

from dohresolver.core.base import BaseResolver
from dohresolver.core.envelope import answer_query, build_answer, parse_query
from dohresolver.core.exceptions import DoHError, QueryValidationError, ResolutionError
from dohresolver.core.models import (
    AnswerRecord,
    DoHQuery,
    DoHResponse,
    LookupResult,
    MailExchange,
    RecordType,
    TYPE_CODES,
)
from dohresolver.core.system import SystemResolver

__all__ = [
    "AnswerRecord",
    "BaseResolver",
    "DoHError",
    "DoHQuery",
    "DoHResponse",
    "LookupResult",
    "MailExchange",
    "QueryValidationError",
    "RecordType",
    "ResolutionError",
    "SystemResolver",
    "TYPE_CODES",
    "answer_query",
    "build_answer",
    "parse_query",
]
