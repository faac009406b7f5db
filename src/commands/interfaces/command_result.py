from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from src.models.resources import Job


class CommandStatus(Enum):
    SUCCESS = "success"
    DECLINED = "declined"


@dataclass
class CommandResult:
    """
    Outcome of a command execution.

    A declined confirmation is a successful no-op and carries no job.
    Failures are raised, not returned.
    """

    operation_id: str
    command_name: str
    status: CommandStatus
    execution_time_ms: float = 0.0
    job: Optional[Job] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def success(
        cls,
        operation_id: str,
        command_name: str,
        job: Job,
        execution_time_ms: float = 0.0,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "CommandResult":
        return cls(
            operation_id=operation_id,
            command_name=command_name,
            status=CommandStatus.SUCCESS,
            execution_time_ms=execution_time_ms,
            job=job,
            metadata=metadata or {},
        )

    @classmethod
    def declined(
        cls,
        operation_id: str,
        command_name: str,
        execution_time_ms: float = 0.0,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "CommandResult":
        return cls(
            operation_id=operation_id,
            command_name=command_name,
            status=CommandStatus.DECLINED,
            execution_time_ms=execution_time_ms,
            metadata=metadata or {},
        )

    def is_success(self) -> bool:
        return self.status == CommandStatus.SUCCESS

    def is_declined(self) -> bool:
        return self.status == CommandStatus.DECLINED

    def has_output(self) -> bool:
        return self.job is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation_id": self.operation_id,
            "command_name": self.command_name,
            "status": self.status.value,
            "execution_time_ms": self.execution_time_ms,
            "job": self.job.model_dump() if self.job is not None else None,
            "metadata": self.metadata,
            "timestamp": self.timestamp.isoformat(),
        }
