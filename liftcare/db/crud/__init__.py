"""CRUD operations, grouped by domain.

Tenant resources take the caller's ``AuthContext`` and build every statement
from the scoped base queries in ``scopes``.
"""

from liftcare.db.crud.customers import (
    list_customers, get_customer, customer_exists, create_customer, update_customer, delete_customer,
    list_buildings, get_building, create_building, update_building, delete_building,
)
from liftcare.db.crud.elevators import (
    list_elevators, get_elevator, elevator_id_taken, building_exists,
    create_elevator, update_elevator, delete_elevator, list_open_alerts,
)
from liftcare.db.crud.technicians import (
    list_technician_users, user_exists,
    list_technicians, get_technician, get_technician_by_user, technician_row,
    create_technician, update_technician, delete_technician,
    list_technician_requests, get_technician_request, has_pending_request,
    create_technician_request, decide_technician_request,
)
from liftcare.db.crud.contracts import (
    PRICING_DEFAULTS,
    list_contracts, get_contract, create_contract, update_contract, delete_contract,
    list_quotations, get_quotation, create_quotation, update_quotation, delete_quotation,
    list_invoices, get_invoice, create_invoice, update_invoice, delete_invoice,
    get_latest_pricing, save_pricing,
)
from liftcare.db.crud.maintenance import (
    list_templates, get_template, create_template, update_template, delete_template,
    list_plans, get_plan, create_plan, update_plan, delete_plan,
    list_jobs, get_job, create_job, update_job, delete_job,
)
from liftcare.db.crud.tickets import list_tickets, get_ticket, create_ticket
from liftcare.db.crud.parts import (
    list_parts, get_part, create_part, update_part, delete_part,
    list_stocks, adjust_stock, list_movements,
)
from liftcare.db.crud.notifications import list_notifications, mark_read, delete_notification
from liftcare.db.crud.dashboard import dashboard_summary
