"""Caller roles."""

from __future__ import annotations

ADMIN = "admin"
TECHNICIAN = "technician"
CUSTOMER = "customer"
MANAGER = "manager"

ALL_ROLES = frozenset({ADMIN, TECHNICIAN, CUSTOMER, MANAGER})

# Roles a caller may pick at registration; staff roles are provisioned by an admin
SELF_REGISTRATION_ROLES = frozenset({CUSTOMER, TECHNICIAN})
