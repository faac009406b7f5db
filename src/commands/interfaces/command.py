from abc import ABC, abstractmethod
from typing import List
import logging
from .command_context import CommandContext
from .command_result import CommandResult


class Command(ABC):
    """
    Base interface for all commands in the site recovery backend.

    Commands encapsulate one operation against the control plane and can be
    executed independently of the API layer.

    All commands must implement:
    - execute(): The operation itself
    - get_command_name(): Unique identifier for the command
    - validate_context(): Context validation before execution
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def execute(self, context: CommandContext) -> CommandResult:
        """
        Execute the command with the given context.

        Errors are not converted into results: they propagate to the caller
        unchanged.

        Args:
            context: CommandContext containing all necessary data and dependencies

        Returns:
            CommandResult with execution status and output

        Raises:
            ValidationError: When context validation fails
        """
        pass

    @abstractmethod
    def get_command_name(self) -> str:
        """
        Return unique identifier for this command.

        Should be lowercase with underscores (e.g., 'apply_recovery_point').
        """
        pass

    @abstractmethod
    def validate_context(self, context: CommandContext) -> bool:
        """
        Validate that the context contains all required data for execution.

        Must not modify the context.

        Returns:
            True if context is valid, False otherwise
        """
        pass

    def get_required_permissions(self) -> List[str]:
        """
        Return list of RBAC actions required to execute this command.

        Default implementation requires no special permissions.
        """
        return []

    def supports_retry(self) -> bool:
        """
        Return whether this command may be retried on failure.

        Commands that start server-side operations are not idempotent and
        should return False.
        """
        return True

    async def pre_execute_hook(self, context: CommandContext) -> None:
        self.logger.info(
            f"Executing command '{self.get_command_name()}' "
            f"for operation {context.operation_id}"
        )

    async def post_execute_hook(
        self, context: CommandContext, result: CommandResult
    ) -> None:
        self.logger.info(
            f"Command '{self.get_command_name()}' finished with status "
            f"'{result.status.value}' for operation {context.operation_id} "
            f"in {result.execution_time_ms:.2f}ms"
        )

    def __str__(self) -> str:
        """String representation of the command"""
        return f"{self.__class__.__name__}(name='{self.get_command_name()}')"

    def __repr__(self) -> str:
        """Detailed string representation of the command"""
        return (
            f"{self.__class__.__name__}("
            f"name='{self.get_command_name()}', "
            f"supports_retry={self.supports_retry()}"
            f")"
        )
