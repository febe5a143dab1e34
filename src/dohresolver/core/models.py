"""Core data models for doh-resolver."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RecordType(str, Enum):
    """DNS record types served by the endpoint."""

    A = "A"
    AAAA = "AAAA"
    MX = "MX"
    TXT = "TXT"
    CNAME = "CNAME"
    PTR = "PTR"


# DNS type codes reported in Answer records
TYPE_CODES: dict[RecordType, int] = {
    RecordType.A: 1,
    RecordType.CNAME: 5,
    RecordType.PTR: 12,
    RecordType.MX: 15,
    RecordType.TXT: 16,
    RecordType.AAAA: 28,
}

ANSWER_TTL = 300


class Status(int, Enum):
    """Envelope status codes."""

    NOERROR = 0
    SERVFAIL = 2


# ============================================================================
# Query Models
# ============================================================================


class DoHQuery(BaseModel):
    """Validated lookup request."""

    name: str = Field(..., min_length=1, description="Domain name, or IP address for PTR")
    record_type: RecordType = Field(default=RecordType.A, description="Record type")


class MailExchange(BaseModel):
    """MX result as returned by a resolver backend."""

    priority: int
    exchange: str

    def __str__(self) -> str:
        return f"{self.priority} {self.exchange}"


# ============================================================================
# Response Models
# ============================================================================


class AnswerRecord(BaseModel):
    """Single record of the JSON envelope."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    record_type: int = Field(..., alias="type")
    ttl: int = Field(default=ANSWER_TTL, alias="TTL")
    data: str


class DoHResponse(BaseModel):
    """JSON envelope.

    ``Answer`` is only set on success and ``Comment`` only on failure;
    :meth:`to_json` leaves the other key out.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: Status = Field(..., alias="Status")
    answer: list[AnswerRecord] | None = Field(default=None, alias="Answer")
    comment: str | None = Field(default=None, alias="Comment")

    @classmethod
    def success(cls, answer: list[AnswerRecord]) -> "DoHResponse":
        return cls(status=Status.NOERROR, answer=answer)

    @classmethod
    def failure(cls, comment: str) -> "DoHResponse":
        return cls(status=Status.SERVFAIL, comment=comment)

    @property
    def ok(self) -> bool:
        return self.status == Status.NOERROR

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ValidationErrorBody(BaseModel):
    """Body returned for rejected requests."""

    error: str


class LookupResult(BaseModel):
    """Outcome of a client lookup."""

    ok: bool
    answers: list[AnswerRecord] = Field(default_factory=list)
    error: str | None = None
