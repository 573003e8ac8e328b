"""Row-scoping policy for multi-tenant tables.

``resolve_scope`` picks a strategy from the caller's role and the resource;
``scope_clause`` renders it as a SQL predicate. Query helpers build every
statement for a resource (list, get, update, delete) on top of that predicate,
so no verb can skip it.

Missing identity never widens access: a customer without ``customer_id`` and
an unknown role both get ``WHERE false``.
"""

from __future__ import annotations

import enum
from typing import Callable

from sqlalchemy import false, true
from sqlalchemy.sql.elements import ColumnElement

from liftcare.access.roles import ADMIN, CUSTOMER, MANAGER, TECHNICIAN
from liftcare.services.auth import AuthContext

OwnerPredicate = Callable[[str], ColumnElement[bool]]


class Scope(str, enum.Enum):
    ALL = "all"
    CUSTOMER = "customer"
    TECHNICIAN = "technician"
    NONE = "none"


_DEFAULT_POLICY: dict[str, Scope] = {
    ADMIN: Scope.ALL,
    MANAGER: Scope.ALL,
    TECHNICIAN: Scope.ALL,
    CUSTOMER: Scope.CUSTOMER,
}

POLICIES: dict[str, dict[str, Scope]] = {
    "buildings": _DEFAULT_POLICY,
    "elevators": _DEFAULT_POLICY,
    "contracts": _DEFAULT_POLICY,
    "quotations": _DEFAULT_POLICY,
    "invoices": _DEFAULT_POLICY,
    "tickets": _DEFAULT_POLICY,
    "alerts": _DEFAULT_POLICY,
    "maintenance_plans": _DEFAULT_POLICY,
    "maintenance_jobs": {**_DEFAULT_POLICY, TECHNICIAN: Scope.TECHNICIAN},
}


def resolve_scope(auth: AuthContext, resource: str) -> Scope:
    policy = POLICIES[resource]
    return policy.get(auth.role, Scope.NONE)


def scope_clause(
    auth: AuthContext,
    resource: str,
    *,
    by_customer: OwnerPredicate | None = None,
    by_technician_user: OwnerPredicate | None = None,
) -> ColumnElement[bool]:
    """Predicate restricting ``resource`` rows to what ``auth`` may touch.

    ``by_customer`` receives the caller's customer id and returns the ownership
    predicate for that tenant; ``by_technician_user`` receives the caller's
    user id and matches rows linked to that user's Technician record.
    """
    scope = resolve_scope(auth, resource)

    if scope is Scope.ALL:
        return true()

    if scope is Scope.CUSTOMER:
        if by_customer is None:
            raise ValueError(f"{resource} has no customer ownership path")
        if not auth.customer_id:
            return false()
        return by_customer(auth.customer_id)

    if scope is Scope.TECHNICIAN:
        if by_technician_user is None:
            raise ValueError(f"{resource} has no technician ownership path")
        return by_technician_user(auth.user_id)

    return false()
