from __future__ import annotations

import pytest

from insurance_assistant.functions import names
from insurance_assistant.functions import requests as r
from insurance_assistant.functions.catalog import (
    CatalogError,
    FunctionCatalog,
    OperationDescriptor,
    build_default_catalog,
)

BLOCKED = {
    names.CREATE_CUSTOMER,
    names.DELETE_CUSTOMER,
    names.GET_ALL_CUSTOMERS,
    names.DELETE_POLICY,
    names.GET_ALL_POLICIES,
    names.UPDATE_POLICY_CONDITIONS,
    names.GET_ALL_AUTO_CLAIMS,
    names.GET_ALL_HOME_CLAIMS,
    names.GET_ALL_HEALTH_CLAIMS,
    names.DELETE_AUTO_CLAIM,
    names.DELETE_HOME_CLAIM,
    names.DELETE_HEALTH_CLAIM,
    names.ASSIGN_ADJUSTER_TO_AUTO_CLAIM,
    names.ASSIGN_ADJUSTER_TO_HOME_CLAIM,
    names.ASSIGN_ADJUSTER_TO_HEALTH_CLAIM,
}


async def _noop(request, client):
    return None


def _op(
    name: str, model=r.GetCustomerByIdReq, description: str = "does a thing", **kw
) -> OperationDescriptor:
    return OperationDescriptor(
        name=name, description=description, request_model=model, handler=_noop, **kw
    )


def test_default_catalog_matches_advertised_names() -> None:
    catalog = build_default_catalog()
    assert catalog.names == names.ADVERTISED_FUNCTIONS
    assert len(catalog) == len(names.ADVERTISED_FUNCTIONS)
    assert {d.name for d in catalog if d.blocked_for_ai} == BLOCKED


def test_only_conditions_and_handoff_skip_ownership() -> None:
    catalog = build_default_catalog()
    unchecked = {d.name for d in catalog if not d.ownership_checked}
    assert unchecked == {names.GET_POLICY_CONDITIONS, names.INFORM_HUMAN_OPERATOR}


def test_duplicate_names_are_rejected() -> None:
    with pytest.raises(CatalogError, match="duplicate"):
        FunctionCatalog([_op("a"), _op("a")], advertised={"a"})


def test_blank_description_is_rejected() -> None:
    with pytest.raises(CatalogError, match="no description"):
        FunctionCatalog([_op("a", description="  ")], advertised={"a"})


def test_advertised_and_registered_must_match() -> None:
    with pytest.raises(CatalogError, match="advertised but not registered: b"):
        FunctionCatalog([_op("a")], advertised={"a", "b"})
    with pytest.raises(CatalogError, match="registered but not advertised: b"):
        FunctionCatalog([_op("a"), _op("b")], advertised={"a"})


def test_checked_function_needs_a_shaped_request() -> None:
    with pytest.raises(CatalogError, match="ownership shapes"):
        FunctionCatalog([_op("a", model=r.GetAllPoliciesReq)], advertised={"a"})

    # Blocked or unchecked functions may use shapeless requests.
    catalog = FunctionCatalog(
        [
            _op("a", model=r.GetAllPoliciesReq, blocked_for_ai=True),
            _op("b", model=r.InformHumanOperatorReq, ownership_checked=False),
        ],
        advertised={"a", "b"},
    )
    assert "a" in catalog and "b" in catalog
    assert catalog.get("c") is None


def test_tool_schemas_use_camel_case_parameters() -> None:
    schemas = {s["function"]["name"]: s for s in build_default_catalog().tool_schemas()}
    assert set(schemas) == names.ADVERTISED_FUNCTIONS

    tool = schemas[names.GET_AUTO_CLAIMS_BY_POLICY_ID]
    assert tool["type"] == "function"
    assert tool["function"]["description"]
    params = tool["function"]["parameters"]
    assert params["type"] == "object"
    assert {"policyId", "page", "size", "status"} <= set(params["properties"])
    assert params["required"] == ["policyId"]
