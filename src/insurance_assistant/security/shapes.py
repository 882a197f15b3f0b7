"""
insurance_assistant.security.shapes

Ownership shapes and the capability classifier.

Responsibilities:
- Define the base class every AI request model derives from (`AIRequest`).
- Define the four ownership-shape bases a request may inherit (at most one).
- Classify a request into exactly one shape, or `unknown`.

A request's shape decides how its owning customer is discovered:
- CustomerOwned:      carries the customer id directly
- PolicyIdOwned:      policy id -> policy -> customer
- PolicyNumberOwned:  policy number -> policy -> customer
- ClaimOwned:         claim id (auto/home/health) -> claim -> policy -> customer
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from insurance_assistant.insurance_client.models import ClaimKind


class OwnershipShape(enum.StrEnum):
    customer = "CUSTOMER_OWNED"
    policy_id = "POLICY_ID_OWNED"
    policy_number = "POLICY_NUMBER_OWNED"
    claim = "CLAIM_OWNED"
    unknown = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class OwnerRef:
    """A further record a request body points at (customer id, policy id or policy number)."""

    shape: OwnershipShape
    value: int | str | None


def declared_shapes(model: type) -> list[OwnershipShape]:
    """Shapes declared anywhere in the class hierarchy, most-derived first, de-duplicated."""
    shapes: list[OwnershipShape] = []
    for klass in model.__mro__:
        shape = klass.__dict__.get("ownership_shape")
        if isinstance(shape, OwnershipShape) and shape not in shapes:
            shapes.append(shape)
    return shapes


class AIRequest(BaseModel):
    """
    Single structured argument of an AI-callable function.

    Tool arguments arrive camelCase from the model; snake_case is accepted as well.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        shapes = declared_shapes(cls)
        if len(shapes) > 1:
            raise TypeError(
                f"{cls.__name__} mixes ownership shapes: {', '.join(s.value for s in shapes)}"
            )

    def linked_owner_refs(self) -> tuple[OwnerRef, ...]:
        """
        Records the request would attach itself to, besides the one its shape names.
        Each must belong to the caller as well; empty for most requests.
        """
        return ()


class CustomerOwned(AIRequest):
    ownership_shape: ClassVar[OwnershipShape] = OwnershipShape.customer

    def owner_customer_id(self) -> int | None:
        return getattr(self, "customer_id", None)


class PolicyIdOwned(AIRequest):
    ownership_shape: ClassVar[OwnershipShape] = OwnershipShape.policy_id

    def owner_policy_id(self) -> int | None:
        return getattr(self, "policy_id", None)


class PolicyNumberOwned(AIRequest):
    ownership_shape: ClassVar[OwnershipShape] = OwnershipShape.policy_number

    def owner_policy_number(self) -> str | None:
        return getattr(self, "policy_number", None)


class ClaimOwned(AIRequest):
    ownership_shape: ClassVar[OwnershipShape] = OwnershipShape.claim
    # Concrete claim requests pin their kind; a request without one cannot be classified.
    claim_kind: ClassVar[ClaimKind | None] = None

    def owner_claim_id(self) -> int | None:
        return getattr(self, "claim_id", None)


def classify(request: object) -> OwnershipShape:
    if not isinstance(request, AIRequest):
        return OwnershipShape.unknown

    shapes = declared_shapes(type(request))
    if len(shapes) != 1:
        return OwnershipShape.unknown

    shape = shapes[0]
    if shape is OwnershipShape.claim and not isinstance(type(request).claim_kind, ClaimKind):
        return OwnershipShape.unknown
    return shape


# --- Module Notes -----------------------------------------------------------
# The shape set is closed: adding a fifth shape means extending `classify` and
# `OwnershipResolver.resolve` together. Anything unmatched is a denial.
