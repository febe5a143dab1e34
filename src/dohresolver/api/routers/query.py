"""DNS query endpoint."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from dohresolver.core.base import BaseResolver
from dohresolver.core.envelope import answer_query, parse_query
from dohresolver.core.models import DoHResponse, ValidationErrorBody

router = APIRouter()


async def get_resolver() -> BaseResolver:
    from dohresolver.api.main import get_resolver
    return get_resolver()


@router.get(
    "/dns-query",
    response_model=DoHResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    responses={
        400: {"model": ValidationErrorBody, "description": "Missing name or unsupported type"},
        500: {"model": DoHResponse, "description": "Resolver error (Status 2)"},
    },
)
async def dns_query(
    name: str | None = Query(default=None, description="Domain name, or IP address for PTR"),
    record_type: str | None = Query(
        default=None, alias="type", description="A, AAAA, MX, TXT, CNAME or PTR (default A)"
    ),
    resolver: BaseResolver = Depends(get_resolver),
):
    """Resolve ``name`` and return the JSON envelope."""
    lookup = parse_query(name, record_type)
    response = await answer_query(resolver, lookup)
    return JSONResponse(
        status_code=200 if response.ok else 500,
        content=response.to_json(),
    )
