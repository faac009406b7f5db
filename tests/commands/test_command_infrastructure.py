import pytest
from unittest.mock import MagicMock

from src.commands.interfaces.command_context import CommandContext
from src.commands.interfaces.command_result import CommandResult, CommandStatus
from src.core.certificates.memory import MemoryCertificateLoader
from src.core.errors import ValidationError
from src.models.resources import Job, RecoveryPoint, ReplicationProtectedItem
from src.recovery.recovery_point_applier import RecoveryPointApplier
from tests.conftest import make_job_payload


@pytest.fixture
def command_context(
    recovery_point: RecoveryPoint, protected_item: ReplicationProtectedItem
) -> CommandContext:
    """Create test command context"""
    return CommandContext(
        operation_id="op-123",
        recovery_point=recovery_point,
        protected_item=protected_item,
        applier=MagicMock(spec=RecoveryPointApplier),
        certificate_loader=MemoryCertificateLoader(),
        should_proceed=lambda subject, action: True,
    )


class TestCommandContext:
    """Test CommandContext functionality"""

    def test_context_creation(self, command_context: CommandContext) -> None:
        assert command_context.operation_id == "op-123"
        assert command_context.protected_item.name == "vm-01"
        assert command_context.primary_cert_file is None
        assert command_context.secondary_cert_file is None
        assert command_context.vault_location is None

    def test_context_validation_missing_operation_id(
        self, recovery_point: RecoveryPoint, protected_item: ReplicationProtectedItem
    ) -> None:
        with pytest.raises(ValidationError, match="operation_id is required"):
            CommandContext(
                operation_id="",
                recovery_point=recovery_point,
                protected_item=protected_item,
                applier=MagicMock(),
                certificate_loader=MagicMock(),
                should_proceed=lambda subject, action: True,
            )

    def test_context_validation_missing_confirmation(
        self, recovery_point: RecoveryPoint, protected_item: ReplicationProtectedItem
    ) -> None:
        with pytest.raises(ValidationError, match="should_proceed is required"):
            CommandContext(
                operation_id="op-1",
                recovery_point=recovery_point,
                protected_item=protected_item,
                applier=MagicMock(),
                certificate_loader=MagicMock(),
                should_proceed=None,
            )


class TestCommandResult:
    """Test CommandResult functionality"""

    def test_success_result_creation(self) -> None:
        job = Job.from_arm(make_job_payload("job-77"))
        result = CommandResult.success(
            operation_id="op-1",
            command_name="apply_recovery_point",
            job=job,
            execution_time_ms=12.5,
        )

        assert result.is_success()
        assert not result.is_declined()
        assert result.has_output()
        assert result.status == CommandStatus.SUCCESS

    def test_declined_result_has_no_output(self) -> None:
        result = CommandResult.declined(
            operation_id="op-1", command_name="apply_recovery_point"
        )

        assert result.is_declined()
        assert not result.is_success()
        assert not result.has_output()
        assert result.job is None

    def test_to_dict(self) -> None:
        job = Job.from_arm(make_job_payload("job-77"))
        result = CommandResult.success(
            operation_id="op-1",
            command_name="apply_recovery_point",
            job=job,
            metadata={"fabric_name": "F1"},
        )

        serialized = result.to_dict()

        assert serialized["status"] == "success"
        assert serialized["operation_id"] == "op-1"
        assert serialized["job"]["name"] == "job-77"
        assert serialized["metadata"] == {"fabric_name": "F1"}
        assert "timestamp" in serialized
