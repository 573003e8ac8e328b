"""Central router that includes all sub-routers."""

from fastapi import APIRouter

from liftcare.api.auth import router as auth_router
from liftcare.api.customers import router as customers_router
from liftcare.api.buildings import router as buildings_router
from liftcare.api.elevators import router as elevators_router
from liftcare.api.technicians import router as technicians_router
from liftcare.api.technician_requests import router as technician_requests_router
from liftcare.api.contracts import router as contracts_router
from liftcare.api.quotations import router as quotations_router
from liftcare.api.invoices import router as invoices_router
from liftcare.api.pricing import router as pricing_router
from liftcare.api.maintenance import router as maintenance_router
from liftcare.api.tickets import router as tickets_router
from liftcare.api.parts import router as parts_router
from liftcare.api.notifications import router as notifications_router
from liftcare.api.dashboard import router as dashboard_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(customers_router)
api_router.include_router(buildings_router)
api_router.include_router(elevators_router)
api_router.include_router(technicians_router)
api_router.include_router(technician_requests_router)
api_router.include_router(contracts_router)
api_router.include_router(quotations_router)
api_router.include_router(invoices_router)
api_router.include_router(pricing_router)
api_router.include_router(maintenance_router)
api_router.include_router(tickets_router)
api_router.include_router(parts_router)
api_router.include_router(notifications_router)
api_router.include_router(dashboard_router)
