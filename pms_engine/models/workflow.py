from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from pms_engine.models.enumerations import Status


class WorkflowRecord(BaseModel):
    """
    Approval/rejection fields carried by every single-level workflow entity.

    ``record_status`` holds the persisted status string (see ``Status``).
    """

    record_status: str = Field(
        default=Status.DRAFT.value,
        description="Current lifecycle status"
    )

    is_approved: bool = Field(default=False)

    approved_by: str = Field(
        default="",
        description="Identifier of the approving actor"
    )

    date_approved: Optional[datetime] = Field(
        default=None,
        description="Approval timestamp (UTC)"
    )

    is_rejected: bool = Field(default=False)

    rejected_by: str = Field(
        default="",
        description="Identifier of the rejecting actor"
    )

    rejection_reason: str = Field(
        default="",
        description="Rejection reason, also used as the return note"
    )

    date_rejected: Optional[datetime] = Field(
        default=None,
        description="Rejection timestamp (UTC)"
    )

    class Config:
        from_attributes = True

    @property
    def status(self) -> Status:
        return Status(self.record_status)


class HrdWorkflowRecord(WorkflowRecord):
    """
    Workflow entity with a second, HRD-level approval track.
    """

    hrd_is_approved: bool = Field(default=False)
    hrd_approved_by: str = Field(default="")
    hrd_date_approved: Optional[datetime] = Field(default=None)
    hrd_is_rejected: bool = Field(default=False)
    hrd_rejected_by: str = Field(default="")
    hrd_rejection_reason: str = Field(default="")
    hrd_date_rejected: Optional[datetime] = Field(default=None)
