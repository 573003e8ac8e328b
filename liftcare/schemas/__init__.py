"""Pydantic request/response schemas."""

from liftcare.schemas.auth import (
    AuthResponse, ChangePasswordRequest, LoginRequest, RegisterRequest, UserOut,
)
from liftcare.schemas.customer import BuildingCreate, BuildingRead, CustomerCreate, CustomerRead
from liftcare.schemas.elevator import AlertRead, ElevatorCreate, ElevatorRead, ElevatorUpdate
from liftcare.schemas.technician import (
    TechnicianCreate, TechnicianRead, TechnicianRequestCreate, TechnicianRequestDecision,
    TechnicianRequestRead, TechnicianUpdate, TechnicianUserRead,
)
from liftcare.schemas.contract import (
    ContractCreate, ContractRead, InvoiceCreate, InvoiceRead, InvoiceUpdate,
    PricingSettingsRead, PricingSettingsUpdate, QuotationCreate, QuotationRead, QuotationUpdate,
)
from liftcare.schemas.maintenance import (
    MaintenanceJobCreate, MaintenanceJobRead, MaintenanceJobUpdate,
    MaintenancePlanCreate, MaintenancePlanRead,
    MaintenanceTemplateCreate, MaintenanceTemplateRead,
)
from liftcare.schemas.ticket import TicketCreate, TicketCreated, TicketRead
from liftcare.schemas.part import (
    PartCreate, PartMovementRead, PartRead, PartStockRead, StockAdjustRequest,
)
from liftcare.schemas.notification import DashboardSummary, MessageResponse, NotificationRead

__all__ = [
    "AuthResponse", "ChangePasswordRequest", "LoginRequest", "RegisterRequest", "UserOut",
    "BuildingCreate", "BuildingRead", "CustomerCreate", "CustomerRead",
    "AlertRead", "ElevatorCreate", "ElevatorRead", "ElevatorUpdate",
    "TechnicianCreate", "TechnicianRead", "TechnicianRequestCreate", "TechnicianRequestDecision",
    "TechnicianRequestRead", "TechnicianUpdate", "TechnicianUserRead",
    "ContractCreate", "ContractRead", "InvoiceCreate", "InvoiceRead", "InvoiceUpdate",
    "PricingSettingsRead", "PricingSettingsUpdate", "QuotationCreate", "QuotationRead", "QuotationUpdate",
    "MaintenanceJobCreate", "MaintenanceJobRead", "MaintenanceJobUpdate",
    "MaintenancePlanCreate", "MaintenancePlanRead",
    "MaintenanceTemplateCreate", "MaintenanceTemplateRead",
    "TicketCreate", "TicketCreated", "TicketRead",
    "PartCreate", "PartMovementRead", "PartRead", "PartStockRead", "StockAdjustRequest",
    "DashboardSummary", "MessageResponse", "NotificationRead",
]
