"""
insurance_assistant.responses

The response envelope returned to the calling model for every AI function invocation.

Responsibilities:
- Enforce the success/data/error invariant at construction time.
- Offer `ok()` / `fail()` constructors so call sites never build inconsistent envelopes.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ResponseEnvelope(BaseModel, Generic[T]):
    """
    success=True  -> data present, error_message absent
    success=False -> error_message present, data absent
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    success: bool
    data: T | None = None
    error_message: str | None = None

    @model_validator(mode="after")
    def _check_invariant(self) -> ResponseEnvelope[T]:
        if self.success:
            if self.data is None or self.error_message is not None:
                raise ValueError("successful envelope requires data and no error message")
        elif not self.error_message or self.data is not None:
            raise ValueError("failed envelope requires an error message and no data")
        return self

    @classmethod
    def ok(cls, data: Any) -> ResponseEnvelope[Any]:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error_message: str) -> ResponseEnvelope[Any]:
        return cls(success=False, error_message=error_message)


# --- Module Notes -----------------------------------------------------------
# Serialized with camelCase keys (`errorMessage`) to match the tool-result shape the
# assistant prompt describes.
