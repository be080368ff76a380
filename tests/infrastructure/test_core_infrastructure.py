"""Tests for the transaction managers and the unified exception handler."""

import pytest
from rest_framework.exceptions import ValidationError as DRFValidationError

from core.domain import (
    DependencyFailureException,
    DomainException,
    DuplicateKeyException,
    EntityNotFoundException,
    ValidationException,
)
from core.infrastructure.exception_handler import unified_exception_handler
from core.infrastructure.response import STATUS_MESSAGE_MAPPING, StatusCode, get_status_message
from core.infrastructure.transaction import DjangoTransactionManager, NoOpTransactionManager
from items.domain import InvalidStatusTransitionException, ItemStatus
from items.infrastructure.models.item_models import ItemModel


class TestNoOpTransactionManager:

    def test_commit(self):
        tx = NoOpTransactionManager()
        with tx.start():
            pass
        assert (tx.started, tx.committed, tx.rolled_back) == (1, 1, 0)

    def test_rollback_reraises(self):
        tx = NoOpTransactionManager()
        with pytest.raises(ValueError):
            with tx.start():
                raise ValueError("boom")
        assert (tx.started, tx.committed, tx.rolled_back) == (1, 0, 1)


@pytest.mark.django_db
class TestDjangoTransactionManager:

    def test_rollback_discards_writes(self):
        from django.utils import timezone

        tx = DjangoTransactionManager()
        now = timezone.now()
        with pytest.raises(RuntimeError):
            with tx.start():
                ItemModel.objects.create(
                    sku="TEST-001", name="Widget", price_amount=100, category_name="tools",
                    category_slug="tools", created_at=now, updated_at=now,
                )
                raise RuntimeError("abort")
        assert ItemModel.objects.count() == 0


class TestExceptionHandler:

    @pytest.mark.parametrize("exc, http_code, code", [
        (EntityNotFoundException("商品", 1), 404, StatusCode.ENTITY_NOT_FOUND),
        (ValidationException("name", "bad"), 400, StatusCode.VALIDATION_ERROR),
        (InvalidStatusTransitionException(ItemStatus.ARCHIVED, ItemStatus.ACTIVE), 400,
         StatusCode.VALIDATION_ERROR),
        (DuplicateKeyException("商品", "sku", "X"), 409, StatusCode.DUPLICATE_ENTITY),
        (DependencyFailureException("database"), 503, StatusCode.SERVICE_UNAVAILABLE),
        (DomainException("other"), 400, StatusCode.BAD_REQUEST),
        (RuntimeError("boom"), 500, StatusCode.SERVER_ERROR),
    ])
    def test_mapping(self, exc, http_code, code):
        response = unified_exception_handler(exc, {})
        assert response.status_code == http_code
        assert response.data["code"] == code
        assert response.data["success"] is False

    def test_domain_message_passed_through(self):
        response = unified_exception_handler(ValidationException("name", "bad"), {})
        assert "bad" in response.data["message"]

    def test_internal_error_message_hidden(self):
        response = unified_exception_handler(RuntimeError("secret detail"), {})
        assert "secret" not in response.data["message"]

    def test_drf_validation_error_carries_details(self):
        response = unified_exception_handler(DRFValidationError({"sku": ["required"]}), {})
        assert response.status_code == 400
        assert "sku" in response.data["data"]


class TestStatusCodes:

    def test_every_code_has_a_message(self):
        codes = {value for name, value in vars(StatusCode).items() if name.isupper()}
        assert codes == set(STATUS_MESSAGE_MAPPING)

    def test_unknown_code(self):
        assert get_status_message(12345) == "未知状态"
