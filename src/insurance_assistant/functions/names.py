"""
insurance_assistant.functions.names

Tool names advertised to the calling model.

The catalog refuses to start unless its registered names equal `ADVERTISED_FUNCTIONS`.
"""

from __future__ import annotations

# Customers
GET_CUSTOMER_BY_ID = "getCustomerById"
UPDATE_CUSTOMER = "updateCustomer"
CREATE_CUSTOMER = "createCustomer"
DELETE_CUSTOMER = "deleteCustomer"
GET_ALL_CUSTOMERS = "getAllCustomers"
GET_CUSTOMER_BY_POLICY_NUMBER = "getCustomerByPolicyNumber"
GET_POLICIES_BY_CUSTOMER_ID = "getPoliciesByCustomerId"

# Policies
GET_POLICY_BY_ID = "getPolicyById"
GET_POLICY_BY_POLICY_NUMBER = "getPolicyByPolicyNumber"
CREATE_POLICY = "createPolicy"
UPDATE_POLICY = "updatePolicy"
DELETE_POLICY = "deletePolicy"
GET_ALL_POLICIES = "getAllPolicies"
GET_AUTO_CLAIMS_BY_POLICY_ID = "getAutoClaimsByPolicyId"
GET_HOME_CLAIMS_BY_POLICY_ID = "getHomeClaimsByPolicyId"
GET_HEALTH_CLAIMS_BY_POLICY_ID = "getHealthClaimsByPolicyId"
GET_POLICY_CONDITIONS = "getPolicyConditions"
UPDATE_POLICY_CONDITIONS = "updatePolicyConditions"

# Claims
CREATE_AUTO_CLAIM = "createAutoClaim"
GET_AUTO_CLAIM_BY_ID = "getAutoClaimById"
GET_ALL_AUTO_CLAIMS = "getAllAutoClaims"
UPDATE_AUTO_CLAIM = "updateAutoClaim"
DELETE_AUTO_CLAIM = "deleteAutoClaim"
ASSIGN_ADJUSTER_TO_AUTO_CLAIM = "assignAdjusterToAutoClaim"

CREATE_HOME_CLAIM = "createHomeClaim"
GET_HOME_CLAIM_BY_ID = "getHomeClaimById"
GET_ALL_HOME_CLAIMS = "getAllHomeClaims"
UPDATE_HOME_CLAIM = "updateHomeClaim"
DELETE_HOME_CLAIM = "deleteHomeClaim"
ASSIGN_ADJUSTER_TO_HOME_CLAIM = "assignAdjusterToHomeClaim"

CREATE_HEALTH_CLAIM = "createHealthClaim"
GET_HEALTH_CLAIM_BY_ID = "getHealthClaimById"
GET_ALL_HEALTH_CLAIMS = "getAllHealthClaims"
UPDATE_HEALTH_CLAIM = "updateHealthClaim"
DELETE_HEALTH_CLAIM = "deleteHealthClaim"
ASSIGN_ADJUSTER_TO_HEALTH_CLAIM = "assignAdjusterToHealthClaim"

# Handoff
INFORM_HUMAN_OPERATOR = "informHumanOperator"

ADVERTISED_FUNCTIONS: frozenset[str] = frozenset(
    {
        GET_CUSTOMER_BY_ID,
        UPDATE_CUSTOMER,
        CREATE_CUSTOMER,
        DELETE_CUSTOMER,
        GET_ALL_CUSTOMERS,
        GET_CUSTOMER_BY_POLICY_NUMBER,
        GET_POLICIES_BY_CUSTOMER_ID,
        GET_POLICY_BY_ID,
        GET_POLICY_BY_POLICY_NUMBER,
        CREATE_POLICY,
        UPDATE_POLICY,
        DELETE_POLICY,
        GET_ALL_POLICIES,
        GET_AUTO_CLAIMS_BY_POLICY_ID,
        GET_HOME_CLAIMS_BY_POLICY_ID,
        GET_HEALTH_CLAIMS_BY_POLICY_ID,
        GET_POLICY_CONDITIONS,
        UPDATE_POLICY_CONDITIONS,
        CREATE_AUTO_CLAIM,
        GET_AUTO_CLAIM_BY_ID,
        GET_ALL_AUTO_CLAIMS,
        UPDATE_AUTO_CLAIM,
        DELETE_AUTO_CLAIM,
        ASSIGN_ADJUSTER_TO_AUTO_CLAIM,
        CREATE_HOME_CLAIM,
        GET_HOME_CLAIM_BY_ID,
        GET_ALL_HOME_CLAIMS,
        UPDATE_HOME_CLAIM,
        DELETE_HOME_CLAIM,
        ASSIGN_ADJUSTER_TO_HOME_CLAIM,
        CREATE_HEALTH_CLAIM,
        GET_HEALTH_CLAIM_BY_ID,
        GET_ALL_HEALTH_CLAIMS,
        UPDATE_HEALTH_CLAIM,
        DELETE_HEALTH_CLAIM,
        ASSIGN_ADJUSTER_TO_HEALTH_CLAIM,
        INFORM_HUMAN_OPERATOR,
    }
)
