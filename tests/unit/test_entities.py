"""
Unit tests for domain entities.
"""

from datetime import date
from uuid import uuid4

import pytest

from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.entities.task import Task, validate_rating
from fieldops.domain.exceptions import (
    AlreadyApprovedError,
    AlreadyRatedError,
    ImmutableFieldError,
    InvalidRatingError,
    InvalidTransitionError,
    RequestNotOpenError,
    RequiredFieldError,
    TaskNotCompletedError,
    ValidationError,
)
from fieldops.domain.value_objects import RequestStatus, Role, TaskStatus, Urgency


def make_worker(**overrides) -> Account:
    defaults = dict(
        name="Wendy Worker",
        email="wendy@example.com",
        password_hash="hash",
        role=Role.FIELD_WORKER,
        skills=["plumbing"],
    )
    defaults.update(overrides)
    return Account.register(**defaults)


def make_request(**overrides) -> ServiceRequest:
    defaults = dict(
        user_id=uuid4(),
        title="Leaking tap",
        description="Kitchen tap drips constantly",
        location="12 High Street",
        category="plumbing",
    )
    defaults.update(overrides)
    return ServiceRequest(**defaults)


def make_task(**overrides) -> Task:
    defaults = dict(service_request_id=uuid4(), field_worker_id=uuid4(), assigned_by=uuid4())
    defaults.update(overrides)
    return Task(**defaults)


class TestAccount:
    """Test Account entity."""

    def test_email_is_lowercased(self):
        account = Account(name="Cara", email="  Cara@Example.COM ", password_hash="h")
        assert account.email == "cara@example.com"

    def test_name_required(self):
        with pytest.raises(RequiredFieldError):
            Account(name="  ", email="a@example.com", password_hash="h")

    def test_field_worker_registers_unapproved(self):
        worker = make_worker()
        assert worker.is_approved is False
        assert worker.skills == ["plumbing"]
        assert worker.can_login() is False
        assert worker.is_assignable() is False

    def test_customer_registers_approved_without_worker_fields(self):
        customer = Account.register(
            name="Cara",
            email="cara@example.com",
            password_hash="h",
            role=Role.CUSTOMER,
            skills=["ignored"],
            license_number="X-1",
        )
        assert customer.is_approved is True
        assert customer.skills == []
        assert customer.license_number == ""
        assert customer.can_login() is True

    def test_approve_makes_worker_assignable(self):
        worker = make_worker()
        worker.approve()
        assert worker.is_approved is True
        assert worker.is_assignable() is True

    def test_approve_twice_conflicts(self):
        worker = make_worker()
        worker.approve()
        with pytest.raises(AlreadyApprovedError):
            worker.approve()

    def test_approve_non_worker_rejected(self):
        customer = Account.register(name="Cara", email="c@example.com", password_hash="h")
        with pytest.raises(ValidationError):
            customer.approve()

    def test_reject_deactivates(self):
        worker = make_worker()
        worker.reject()
        assert worker.is_active is False
        assert worker.is_assignable() is False

    def test_profile_update_allow_list_for_customer(self):
        customer = Account.register(name="Cara", email="c@example.com", password_hash="h")
        customer.apply_profile_update({"phone": " 555-0100 ", "address": "1 Road"})
        assert customer.phone == "555-0100"
        assert customer.address == "1 Road"

        with pytest.raises(ImmutableFieldError):
            customer.apply_profile_update({"skills": ["welding"]})

    def test_profile_update_worker_fields(self):
        worker = make_worker()
        worker.apply_profile_update({"skills": ["electrical"], "experience": "5 years"})
        assert worker.skills == ["electrical"]
        assert worker.experience == "5 years"

    @pytest.mark.parametrize("field_name", ["email", "role"])
    def test_identity_fields_are_immutable(self, field_name):
        worker = make_worker()
        with pytest.raises(ImmutableFieldError) as exc_info:
            worker.apply_profile_update({field_name: "x"})
        assert exc_info.value.field_names == [field_name]
        assert worker.email == "wendy@example.com"
        assert worker.role == Role.FIELD_WORKER

    def test_empty_profile_update_rejected(self):
        with pytest.raises(ValidationError):
            make_worker().apply_profile_update({})

    @pytest.mark.parametrize("field_name", ["name", "phone", "address", "skills", "experience"])
    def test_null_profile_values_rejected(self, field_name):
        worker = make_worker(phone="555-0100")
        with pytest.raises(RequiredFieldError):
            worker.apply_profile_update({"phone": "555-0199", field_name: None})
        assert worker.phone == "555-0100"
        assert worker.skills == ["plumbing"]


class TestServiceRequest:
    """Test ServiceRequest entity."""

    def test_defaults(self):
        request = make_request()
        assert request.status == RequestStatus.OPEN
        assert request.urgency == Urgency.MEDIUM
        assert request.budget == 0.0
        assert request.assigned_field_worker_id is None

    @pytest.mark.parametrize("field_name", ["title", "description", "location", "category"])
    def test_required_fields(self, field_name):
        with pytest.raises(RequiredFieldError):
            make_request(**{field_name: "   "})

    def test_mark_assigned(self):
        request = make_request()
        worker_id = uuid4()
        request.mark_assigned(worker_id)
        assert request.status == RequestStatus.ASSIGNED
        assert request.assigned_field_worker_id == worker_id

    def test_mark_assigned_requires_open(self):
        request = make_request(status=RequestStatus.COMPLETED)
        with pytest.raises(RequestNotOpenError):
            request.mark_assigned(uuid4())

    def test_cancel_clears_worker(self):
        request = make_request()
        request.mark_assigned(uuid4())
        request.mirror_task_status(TaskStatus.CANCELLED)
        assert request.status == RequestStatus.CANCELLED
        assert request.assigned_field_worker_id is None

    def test_apply_update_rejects_status(self):
        request = make_request()
        with pytest.raises(ValidationError):
            request.apply_update({"status": "completed"})
        assert request.status == RequestStatus.OPEN

    def test_apply_update(self):
        request = make_request()
        request.apply_update({"title": " New title ", "urgency": "high", "budget": 120.0})
        assert request.title == "New title"
        assert request.urgency == Urgency.HIGH
        assert request.budget == 120.0

    @pytest.mark.parametrize("field_name", ["title", "urgency", "budget"])
    def test_apply_update_rejects_null(self, field_name):
        request = make_request(budget=50.0)
        with pytest.raises(RequiredFieldError):
            request.apply_update({"budget": 75.0, field_name: None})
        assert request.budget == 50.0
        assert request.urgency == Urgency.MEDIUM

    def test_preferred_date_can_be_cleared(self):
        request = make_request(preferred_date=date(2026, 11, 2))
        request.apply_update({"preferred_date": None})
        assert request.preferred_date is None


class TestTask:
    """Test Task entity state machine and rating."""

    def test_start_stamps_started_at_once(self):
        task = make_task()
        task.change_status(TaskStatus.IN_PROGRESS)
        started_at = task.started_at
        assert started_at is not None

        task.change_status(TaskStatus.IN_PROGRESS)
        assert task.started_at == started_at

    def test_complete_stamps_completed_at_once(self):
        task = make_task()
        task.change_status(TaskStatus.IN_PROGRESS)
        task.change_status(TaskStatus.COMPLETED, completion_notes="done", completion_photos=["a.jpg"])
        completed_at = task.completed_at

        task.change_status(TaskStatus.COMPLETED, completion_notes="done again")
        assert task.completed_at == completed_at
        assert task.completion_notes == "done again"
        assert task.completion_photos == ["a.jpg"]

    def test_cannot_skip_in_progress(self):
        task = make_task()
        with pytest.raises(InvalidTransitionError):
            task.change_status(TaskStatus.COMPLETED)
        assert task.status == TaskStatus.ASSIGNED
        assert task.completed_at is None

    @pytest.mark.parametrize("target", [TaskStatus.ASSIGNED, TaskStatus.IN_PROGRESS])
    def test_terminal_states_reject_transitions(self, target):
        task = make_task()
        task.change_status(TaskStatus.CANCELLED)
        with pytest.raises(InvalidTransitionError):
            task.change_status(target)

    def test_rate_requires_completed(self):
        task = make_task()
        with pytest.raises(TaskNotCompletedError):
            task.rate(5)

    def test_rate_once(self):
        task = make_task(status=TaskStatus.COMPLETED)
        task.rate(4, "good")
        assert task.customer_rating == 4
        assert task.customer_feedback == "good"

        with pytest.raises(AlreadyRatedError):
            task.rate(1, "changed my mind")
        assert task.customer_rating == 4
        assert task.customer_feedback == "good"

    @pytest.mark.parametrize("rating", [0, 6, -1, 4.5, "5", True, None])
    def test_invalid_ratings(self, rating):
        with pytest.raises(InvalidRatingError):
            validate_rating(rating)

    def test_invalid_rating_checked_before_status(self):
        with pytest.raises(InvalidRatingError):
            make_task().rate(9)
