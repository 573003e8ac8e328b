"""Declarative capability table: which roles may invoke each operation.

Every route declares its ``(resource, action)`` pair when the router module is
imported; ``guard`` in ``liftcare.dependencies`` is the only place the table is
checked. ``ANY`` means any authenticated caller, with row scoping deciding
what that caller actually sees.
"""

from __future__ import annotations

from liftcare.access.roles import ADMIN, CUSTOMER, MANAGER, TECHNICIAN

ANY = None

_ADMIN = frozenset({ADMIN})
_STAFF = frozenset({ADMIN, TECHNICIAN})
_STOCK = frozenset({ADMIN, MANAGER})

CAPABILITIES: dict[tuple[str, str], frozenset[str] | None] = {
    ("auth", "me"): ANY,
    ("auth", "change_password"): ANY,

    ("customers", "list"): _ADMIN,
    ("customers", "read"): _ADMIN,
    ("customers", "create"): _ADMIN,
    ("customers", "update"): _ADMIN,
    ("customers", "delete"): _ADMIN,
    ("customers", "me"): frozenset({CUSTOMER}),

    ("buildings", "list"): ANY,
    ("buildings", "read"): ANY,
    ("buildings", "create"): _ADMIN,
    ("buildings", "update"): _ADMIN,
    ("buildings", "delete"): _ADMIN,

    ("elevators", "list"): ANY,
    ("elevators", "read"): ANY,
    ("elevators", "create"): _ADMIN,
    ("elevators", "update"): _ADMIN,
    ("elevators", "delete"): _ADMIN,

    ("technician_users", "list"): _ADMIN,
    ("technicians", "list"): _STAFF,
    ("technicians", "create"): _ADMIN,
    ("technicians", "update"): _ADMIN,
    ("technicians", "delete"): _ADMIN,

    ("technician_requests", "list"): _ADMIN,
    ("technician_requests", "create"): frozenset({TECHNICIAN}),
    ("technician_requests", "decide"): _ADMIN,

    ("contracts", "list"): ANY,
    ("contracts", "read"): ANY,
    ("contracts", "create"): _ADMIN,
    ("contracts", "update"): _ADMIN,
    ("contracts", "delete"): _ADMIN,

    ("quotations", "list"): ANY,
    ("quotations", "read"): ANY,
    ("quotations", "create"): _ADMIN,
    ("quotations", "update"): _ADMIN,
    ("quotations", "delete"): _ADMIN,

    ("invoices", "list"): ANY,
    ("invoices", "read"): ANY,
    ("invoices", "create"): _ADMIN,
    ("invoices", "update"): _ADMIN,
    ("invoices", "delete"): _ADMIN,

    ("pricing_settings", "read"): _ADMIN,
    ("pricing_settings", "update"): _ADMIN,

    ("maintenance_templates", "list"): _STAFF,
    ("maintenance_templates", "create"): _ADMIN,
    ("maintenance_templates", "update"): _ADMIN,
    ("maintenance_templates", "delete"): _ADMIN,

    ("maintenance_plans", "list"): ANY,
    ("maintenance_plans", "create"): _STAFF,
    ("maintenance_plans", "update"): _STAFF,
    ("maintenance_plans", "delete"): _ADMIN,

    ("maintenance_jobs", "list"): ANY,
    ("maintenance_jobs", "read"): ANY,
    ("maintenance_jobs", "create"): _STAFF,
    ("maintenance_jobs", "update"): _STAFF,
    ("maintenance_jobs", "delete"): _ADMIN,

    ("tickets", "list"): ANY,
    ("tickets", "read"): ANY,
    ("tickets", "create"): ANY,

    ("parts", "list"): _STAFF,
    ("parts", "create"): _STOCK,
    ("parts", "update"): _STOCK,
    ("parts", "delete"): _STOCK,
    ("part_stocks", "list"): _STAFF,
    ("part_stocks", "adjust"): _ADMIN,
    ("part_movements", "list"): _STAFF,

    ("notifications", "list"): ANY,
    ("notifications", "mark_read"): ANY,
    ("notifications", "delete"): ANY,

    ("alerts", "list"): ANY,
    ("dashboard", "summary"): ANY,
}


def allowed_roles(resource: str, action: str) -> frozenset[str] | None:
    """Allowed role set for an operation; ``None`` means any authenticated role.

    Raises KeyError for an operation that was never declared, so a route
    cannot be registered without an explicit entry.
    """
    try:
        return CAPABILITIES[(resource, action)]
    except KeyError:
        raise KeyError(f"No capability declared for {resource}:{action}") from None
