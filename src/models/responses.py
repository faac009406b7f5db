from pydantic import BaseModel, Field

from src.models.resources import Job


class JobResponse(BaseModel):
    operation_id: str = Field(..., description="Client request id of this call")
    status: str
    job: Job
