"""
insurance_assistant.functions.catalog

Registry of AI-callable functions.

Responsibilities:
- Hold one descriptor per function: name, description, request model, handler and the two
  security attributes (`blocked_for_ai`, `ownership_checked`).
- Validate the registry at startup so a misconfigured function never reaches the model.
- Export the registry as tool schemas for the calling model.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from insurance_assistant.insurance_client.http import InsuranceApiClient
from insurance_assistant.security.shapes import AIRequest, declared_shapes

Handler = Callable[[Any, InsuranceApiClient], Awaitable[Any]]


class CatalogError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class OperationDescriptor:
    name: str
    description: str
    request_model: type[AIRequest]
    handler: Handler
    blocked_for_ai: bool = False
    # False only for functions that touch no customer-scoped record (conditions, handoff).
    ownership_checked: bool = True

    def tool_schema(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.request_model.model_json_schema(by_alias=True),
            },
        }


class FunctionCatalog:
    """
    Immutable after construction.

    Raises `CatalogError` when:
    - two descriptors share a name, or a description is blank;
    - an ownership-checked, non-blocked function's request model does not declare exactly
      one ownership shape;
    - the registered names differ from the advertised ones.
    """

    def __init__(
        self, descriptors: Iterable[OperationDescriptor], *, advertised: Iterable[str]
    ) -> None:
        entries: dict[str, OperationDescriptor] = {}
        for d in descriptors:
            if d.name in entries:
                raise CatalogError(f"duplicate function name: {d.name}")
            if not d.description.strip():
                raise CatalogError(f"function {d.name} has no description")
            if d.ownership_checked and not d.blocked_for_ai:
                shapes = declared_shapes(d.request_model)
                if len(shapes) != 1:
                    raise CatalogError(
                        f"function {d.name}: request model {d.request_model.__name__} "
                        f"declares {len(shapes)} ownership shapes, expected 1"
                    )
            entries[d.name] = d

        advertised_names = frozenset(advertised)
        missing = sorted(advertised_names - entries.keys())
        unadvertised = sorted(entries.keys() - advertised_names)
        if missing:
            raise CatalogError(f"advertised but not registered: {', '.join(missing)}")
        if unadvertised:
            raise CatalogError(f"registered but not advertised: {', '.join(unadvertised)}")

        self._entries = entries

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._entries)

    def get(self, name: str) -> OperationDescriptor | None:
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[OperationDescriptor]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def tool_schemas(self) -> list[dict[str, Any]]:
        return [d.tool_schema() for d in sorted(self._entries.values(), key=lambda d: d.name)]


def build_default_catalog() -> FunctionCatalog:
    # Imported here: the domain modules import `OperationDescriptor` from this module.
    from insurance_assistant.functions import claims, customers, handoff, policies
    from insurance_assistant.functions.names import ADVERTISED_FUNCTIONS

    return FunctionCatalog(
        [
            *customers.OPERATIONS,
            *policies.OPERATIONS,
            *claims.OPERATIONS,
            *handoff.OPERATIONS,
        ],
        advertised=ADVERTISED_FUNCTIONS,
    )


# --- Module Notes -----------------------------------------------------------
# Blocked functions stay registered and advertised: the model may still try to call them,
# and the middleware answers with the blocked-for-AI message instead of an unknown name.
