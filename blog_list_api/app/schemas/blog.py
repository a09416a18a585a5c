"""
Pydantic models for blog records.

``BlogCreate`` describes what a client may submit; ``BlogRead`` is the
external record returned by every endpoint.  Stored documents carry
MongoDB's ``_id`` and a ``__v`` version marker; ``to_external`` is the
single place where a document is turned into the external shape, and
it is applied on every path that returns a record.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from blog_list_api.app.core.errors import BlogValidationError

# Version marker written on insert.  Never leaves the service.
DOCUMENT_VERSION = 0

# Largest integer BSON can store (signed 64-bit).
MAX_LIKES = 2**63 - 1

EXTERNAL_FIELDS = ("id", "title", "author", "url", "likes")


class BlogCreate(BaseModel):
    """Schema for creating a blog.

    Unknown keys are ignored, so a client-supplied ``_id``, ``id`` or
    ``__v`` never reaches the store.
    """

    title: str = Field(..., min_length=1, examples=["React patterns"])
    author: Optional[str] = Field(None, examples=["Michael Chan"])
    url: str = Field(..., min_length=1, examples=["https://reactpatterns.com/"])
    likes: int = Field(0, ge=0, le=MAX_LIKES, examples=[7])

    model_config = {
        "extra": "ignore",
        "str_strip_whitespace": True,
    }

    @field_validator("likes", mode="before")
    @classmethod
    def default_likes(cls, v: Any) -> Any:
        # An explicit null counts as "not given".
        if v is None:
            return 0
        if isinstance(v, bool):
            raise ValueError("likes must be a number, not a boolean")
        return v

    def to_document(self) -> Dict[str, Any]:
        """Return the mapping to insert into the collection."""
        document = self.model_dump()
        document["__v"] = DOCUMENT_VERSION
        return document


class BlogRead(BaseModel):
    """Schema for reading a blog from the API."""

    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int = 0


def validate_for_create(payload: Any) -> BlogCreate:
    """Validate a candidate record before it is written.

    Raises ``BlogValidationError`` when ``payload`` is not an object,
    when ``title`` or ``url`` is missing or empty, or when ``likes`` is
    not a non-negative integer.  A missing ``likes`` becomes 0.
    """
    if not isinstance(payload, Mapping):
        raise BlogValidationError("Blog payload must be a JSON object")
    try:
        return BlogCreate.model_validate(dict(payload))
    except ValidationError as exc:
        raise BlogValidationError(_describe(exc)) from exc


def to_external(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Shape a stored document into its external representation.

    Only ``id`` (the stringified ``_id``) and the four business fields
    are copied; anything else on the document is dropped.
    """
    return {
        "id": str(document["_id"]),
        "title": document.get("title"),
        "author": document.get("author"),
        "url": document.get("url"),
        "likes": document.get("likes") or 0,
    }


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(p) for p in error["loc"]) or "body"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)
