"""SQLAlchemy ORM models.

Importing this package registers every table on ``Base.metadata``.
"""

from liftcare.models.base import Base
from liftcare.models.user import User
from liftcare.models.customer import Customer, Building
from liftcare.models.elevator import Elevator, Alert, ELEVATOR_STATES
from liftcare.models.technician import Technician, TechnicianRequest, REQUEST_STATUSES
from liftcare.models.contract import Contract, Quotation, Invoice, PricingSettings
from liftcare.models.maintenance import MaintenanceTemplate, MaintenancePlan, MaintenanceJob
from liftcare.models.ticket import Ticket, TICKET_PRIORITIES, OPEN_TICKET_STATUSES
from liftcare.models.part import Part, PartMovement
from liftcare.models.notification import Notification

__all__ = [
    "Base", "User",
    "Customer", "Building",
    "Elevator", "Alert", "ELEVATOR_STATES",
    "Technician", "TechnicianRequest", "REQUEST_STATUSES",
    "Contract", "Quotation", "Invoice", "PricingSettings",
    "MaintenanceTemplate", "MaintenancePlan", "MaintenanceJob",
    "Ticket", "TICKET_PRIORITIES", "OPEN_TICKET_STATUSES",
    "Part", "PartMovement",
    "Notification",
]
