from abc import ABC, abstractmethod

from src.models.resources import Job


class JobTracker(ABC):
    """Resolves accepted operations into queryable job resources"""

    @abstractmethod
    def resolve_job_id(self, location_reference: str) -> str:
        """
        Extract the job id from an operation's location reference.

        Pure parsing, no remote call.

        Raises:
            RemoteOperationError: If the reference does not name a job
        """
        pass

    @abstractmethod
    async def fetch(self, job_id: str) -> Job:
        """
        Fetch the current snapshot of a job.

        Raises:
            RemoteOperationError: If the service call fails
        """
        pass
