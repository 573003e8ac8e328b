from datetime import date

import pytest
from pydantic import ValidationError

from liftcare.schemas import (
    ChangePasswordRequest,
    CustomerCreate,
    ElevatorCreate,
    LoginRequest,
    MaintenanceJobCreate,
    RegisterRequest,
    StockAdjustRequest,
    TechnicianRequestCreate,
    TicketCreate,
)


def test_register_accepts_camel_case_customer_id():
    body = RegisterRequest.model_validate(
        {"email": "a@test.com", "password": "secret123", "name": "A", "customerId": "C-1"}
    )
    assert body.customer_id == "C-1"
    assert body.role is None


def test_change_password_aliases():
    body = ChangePasswordRequest.model_validate({"currentPassword": "old", "newPassword": "newpassword"})
    assert body.current_password == "old"
    assert body.new_password == "newpassword"


def test_customer_requires_name_and_business_type():
    with pytest.raises(ValidationError):
        CustomerCreate(name="", business_type="Commercial")
    with pytest.raises(ValidationError):
        CustomerCreate.model_validate({"name": "ABC Co"})


def test_customer_blank_optionals_become_none():
    body = CustomerCreate(name="ABC Co", business_type="Commercial", contact_email="  ")
    assert body.contact_email is None


def test_elevator_unknown_state_coerced_to_normal():
    body = ElevatorCreate(id="EL-1", name="Lift", building_id="B-1", state="exploded")
    assert body.state == "normal"
    assert ElevatorCreate(id="EL-1", name="Lift", building_id="B-1", state="fault").state == "fault"


def test_elevator_null_load_defaults_to_zero():
    body = ElevatorCreate.model_validate({"id": "EL-1", "name": "Lift", "building_id": "B-1", "current_load": None})
    assert body.current_load == 0


def test_job_type_must_be_known():
    with pytest.raises(ValidationError):
        MaintenanceJobCreate(elevator_id="EL-1", job_type="surprise")


def test_ticket_uses_elevator_id_alias():
    body = TicketCreate.model_validate({"elevatorId": "EL-1", "description": "Door stuck"})
    assert body.elevator_id == "EL-1"
    assert body.priority == "medium"


def test_stock_adjust_rejects_zero():
    with pytest.raises(ValidationError):
        StockAdjustRequest(part_id="P-1", change_qty=0)


def test_technician_request_requires_application_fields():
    with pytest.raises(ValidationError):
        TechnicianRequestCreate.model_validate({"phone": "1", "specialty": "x"})
    body = TechnicianRequestCreate(
        phone="1", specialty="x", address="a", date_of_birth=date(1990, 1, 1),
        experience="e", education="ed",
    )
    assert body.notes is None


def test_passwords_keep_surrounding_whitespace():
    body = RegisterRequest.model_validate(
        {"email": " a@test.com ", "password": "  secret99  ", "name": "A"}
    )
    assert body.email == "a@test.com"
    assert body.password == "  secret99  "

    change = ChangePasswordRequest.model_validate({"currentPassword": " old ", "newPassword": " new-pass "})
    assert change.current_password == " old "
    assert change.new_password == " new-pass "


def test_new_password_over_bcrypt_limit_rejected():
    with pytest.raises(ValidationError):
        RegisterRequest.model_validate({"email": "a@test.com", "password": "x" * 80, "name": "A"})
    with pytest.raises(ValidationError):
        ChangePasswordRequest.model_validate({"currentPassword": "old", "newPassword": "x" * 80})
    # multi-byte characters count by encoded length
    with pytest.raises(ValidationError):
        RegisterRequest.model_validate({"email": "a@test.com", "password": "é" * 40, "name": "A"})


def test_login_accepts_long_password():
    body = LoginRequest.model_validate({"email": "a@test.com", "password": "y" * 80})
    assert len(body.password) == 80
