"""Tests for service layer structured logging.

These tests verify that material operations emit structured log entries
with appropriate context information.
"""

import logging
from unittest.mock import MagicMock

import pytest

from src.models.material import Material, MaterialDraft
from src.services.api_client import ApiClient
from src.services.logging_utils import get_service_logger, log_operation
from src.services.material_service import MaterialService


class TestLoggingUtilities:
    """Tests for logging utility functions."""

    def test_get_service_logger_returns_logger(self):
        """get_service_logger returns a configured Logger instance."""
        logger = get_service_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "materials_admin.services.test_module"

    def test_get_service_logger_extracts_module_name(self):
        """get_service_logger extracts module name from full path."""
        logger = get_service_logger("src.services.material_service")
        assert logger.name == "materials_admin.services.material_service"

    def test_log_operation_logs_at_info_level(self, caplog):
        """log_operation logs at INFO level by default."""
        logger = get_service_logger("test")

        with caplog.at_level(logging.INFO):
            log_operation(
                logger,
                operation="test_op",
                outcome="success",
                material_id=123,
            )

        assert "test_op: success" in caplog.text
        assert caplog.records[-1].levelno == logging.INFO

    def test_log_operation_logs_at_custom_level(self, caplog):
        """log_operation respects custom log level."""
        logger = get_service_logger("test")

        with caplog.at_level(logging.DEBUG):
            log_operation(
                logger,
                operation="debug_op",
                outcome="debug_outcome",
                level=logging.DEBUG,
            )

        assert "debug_op: debug_outcome" in caplog.text
        assert caplog.records[-1].levelno == logging.DEBUG

    def test_log_operation_includes_context_in_extra(self, caplog):
        """log_operation passes context via extra parameter."""
        logger = get_service_logger("test")

        with caplog.at_level(logging.INFO):
            log_operation(
                logger,
                operation="context_test",
                outcome="success",
                material_id=456,
                count=2,
            )

        record = caplog.records[-1]
        assert record.operation == "context_test"
        assert record.outcome == "success"
        assert record.material_id == 456
        assert record.count == 2


class TestMaterialServiceLogging:
    """Tests that material operations emit structured logs."""

    @pytest.fixture
    def client(self):
        return MagicMock(spec=ApiClient)

    def test_create_logs_new_id(self, client, caplog):
        client.post.return_value = {"material": {"id": 11, "name": "Bronze"}}

        with caplog.at_level(logging.INFO, logger="materials_admin.services"):
            MaterialService(client).create(MaterialDraft(name="Bronze"))

        record = caplog.records[-1]
        assert record.operation == "create_material"
        assert record.material_id == 11

    def test_update_logs_id(self, client, caplog):
        material = Material(id=5, name="Zinc")
        client.put.return_value = {"material": material.to_dict()}

        with caplog.at_level(logging.INFO, logger="materials_admin.services"):
            MaterialService(client).update(5, material)

        assert caplog.records[-1].operation == "update_material"
        assert caplog.records[-1].material_id == 5

    def test_delete_logs_id(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="materials_admin.services"):
            MaterialService(client).delete(5)

        assert "delete_material: success" in caplog.text

    def test_failed_request_logs_nothing(self, client, caplog):
        client.delete.side_effect = RuntimeError("boom")

        with caplog.at_level(logging.INFO, logger="materials_admin.services"):
            with pytest.raises(RuntimeError):
                MaterialService(client).delete(5)

        assert "delete_material" not in caplog.text
