"""
insurance_assistant.functions.customers

Customer functions.

Responsibilities:
- Look up and update the signed-in customer's own record.
- List the signed-in customer's policies.
- Register the admin-only customer functions so the model gets a blocked answer for them.
"""

from __future__ import annotations

from typing import Any

from insurance_assistant.functions import names
from insurance_assistant.functions.catalog import OperationDescriptor
from insurance_assistant.functions.requests import (
    CreateCustomerReq,
    DeleteCustomerReq,
    GetAllCustomersReq,
    GetCustomerByIdReq,
    GetCustomerByPolicyNumberReq,
    GetPoliciesByCustomerIdReq,
    UpdateCustomerReq,
)
from insurance_assistant.insurance_client.http import InsuranceApiClient
from insurance_assistant.insurance_client.models import CustomerDto, PolicyDto


async def get_customer_by_id(
    req: GetCustomerByIdReq, client: InsuranceApiClient
) -> CustomerDto | None:
    return await client.get_customer_by_id(req.customer_id)


async def get_customer_by_policy_number(
    req: GetCustomerByPolicyNumberReq, client: InsuranceApiClient
) -> CustomerDto | None:
    return await client.get_customer_by_policy_number(req.policy_number.strip())


async def get_policies_by_customer_id(
    req: GetPoliciesByCustomerIdReq, client: InsuranceApiClient
) -> list[PolicyDto]:
    return await client.get_policies_by_customer_id(req.customer_id)


async def update_customer(req: UpdateCustomerReq, client: InsuranceApiClient) -> CustomerDto:
    customer = req.customer.model_copy(update={"id": req.customer_id})
    return await client.update_customer(req.customer_id, customer)


async def create_customer(req: CreateCustomerReq, client: InsuranceApiClient) -> CustomerDto:
    return await client.create_customer(req.customer)


async def delete_customer(req: DeleteCustomerReq, client: InsuranceApiClient) -> dict[str, Any]:
    await client.delete_customer(req.customer_id)
    return {"status": "SUCCESS", "message": "Customer deleted successfully."}


async def get_all_customers(
    req: GetAllCustomersReq, client: InsuranceApiClient
) -> list[CustomerDto]:
    return await client.get_all_customers(name=req.name)


OPERATIONS: tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name=names.GET_CUSTOMER_BY_ID,
        description=(
            "Retrieves the signed-in customer's profile by customer ID: name, contact "
            "details, address and date of birth."
        ),
        request_model=GetCustomerByIdReq,
        handler=get_customer_by_id,
    ),
    OperationDescriptor(
        name=names.GET_CUSTOMER_BY_POLICY_NUMBER,
        description=(
            "Finds the customer that holds a policy, given the policy number the customer "
            "quotes (for example POL-12345)."
        ),
        request_model=GetCustomerByPolicyNumberReq,
        handler=get_customer_by_policy_number,
    ),
    OperationDescriptor(
        name=names.GET_POLICIES_BY_CUSTOMER_ID,
        description="Lists all policies held by the given customer ID.",
        request_model=GetPoliciesByCustomerIdReq,
        handler=get_policies_by_customer_id,
    ),
    OperationDescriptor(
        name=names.UPDATE_CUSTOMER,
        description=(
            "Updates the signed-in customer's contact details or address. Confirm the "
            "changes with the customer before calling."
        ),
        request_model=UpdateCustomerReq,
        handler=update_customer,
    ),
    OperationDescriptor(
        name=names.CREATE_CUSTOMER,
        description="Registers a new customer. Reserved for customer service staff.",
        request_model=CreateCustomerReq,
        handler=create_customer,
        blocked_for_ai=True,
    ),
    OperationDescriptor(
        name=names.DELETE_CUSTOMER,
        description="Permanently deletes a customer record. Reserved for customer service staff.",
        request_model=DeleteCustomerReq,
        handler=delete_customer,
        blocked_for_ai=True,
    ),
    OperationDescriptor(
        name=names.GET_ALL_CUSTOMERS,
        description="Lists all customers, optionally filtered by name. Reserved for staff.",
        request_model=GetAllCustomersReq,
        handler=get_all_customers,
        blocked_for_ai=True,
    ),
)
