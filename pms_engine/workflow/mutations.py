"""
workflow/mutations.py

Side effects a successful transition produces on a workflow-bearing record.
The caller persists the record afterwards.
"""

from datetime import datetime, timezone

from pms_engine.core.exceptions import RejectionReasonRequiredError
from pms_engine.models.enumerations import Status
from pms_engine.models.workflow import HrdWorkflowRecord, WorkflowRecord


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def apply_approval(record: WorkflowRecord, approver_id: str) -> None:
    """Mark approved and clear any earlier rejection."""
    record.is_approved = True
    record.approved_by = approver_id
    record.date_approved = _utcnow()
    record.is_rejected = False
    record.rejected_by = ""
    record.rejection_reason = ""
    record.date_rejected = None
    record.record_status = Status.APPROVED_AND_ACTIVE.value


def apply_rejection(record: WorkflowRecord, rejector_id: str, reason: str) -> None:
    """
    Mark rejected. A reason is mandatory so the submitter always learns why.

    Raises:
        RejectionReasonRequiredError: ``reason`` is empty; the record is untouched.
    """
    if not reason:
        raise RejectionReasonRequiredError()

    record.is_rejected = True
    record.rejected_by = rejector_id
    record.rejection_reason = reason
    record.date_rejected = _utcnow()
    record.is_approved = False
    record.approved_by = ""
    record.date_approved = None
    record.record_status = Status.REJECTED.value


def apply_return(record: WorkflowRecord, returner_id: str, reason: str) -> None:
    """Send back for revision; the note lives in ``rejection_reason``."""
    record.is_approved = False
    record.is_rejected = False
    record.rejection_reason = reason
    record.record_status = Status.RETURNED.value


def reset_workflow(record: WorkflowRecord) -> None:
    """Clear approval and rejection fields. ``record_status`` is left alone."""
    record.is_approved = False
    record.approved_by = ""
    record.date_approved = None
    record.is_rejected = False
    record.rejected_by = ""
    record.rejection_reason = ""
    record.date_rejected = None


# ---------------------------------------------------------------------------
# HRD approval track
# ---------------------------------------------------------------------------


def apply_hrd_approval(record: HrdWorkflowRecord, approver_id: str) -> None:
    record.hrd_is_approved = True
    record.hrd_approved_by = approver_id
    record.hrd_date_approved = _utcnow()
    record.hrd_is_rejected = False
    record.hrd_rejected_by = ""
    record.hrd_rejection_reason = ""
    record.hrd_date_rejected = None
    record.record_status = Status.APPROVED_AND_ACTIVE.value


def apply_hrd_rejection(record: HrdWorkflowRecord, rejector_id: str, reason: str) -> None:
    if not reason:
        raise RejectionReasonRequiredError()

    record.hrd_is_rejected = True
    record.hrd_rejected_by = rejector_id
    record.hrd_rejection_reason = reason
    record.hrd_date_rejected = _utcnow()
    record.hrd_is_approved = False
    record.hrd_approved_by = ""
    record.hrd_date_approved = None
    record.record_status = Status.REJECTED.value


def reset_hrd_workflow(record: HrdWorkflowRecord) -> None:
    record.hrd_is_approved = False
    record.hrd_approved_by = ""
    record.hrd_date_approved = None
    record.hrd_is_rejected = False
    record.hrd_rejected_by = ""
    record.hrd_rejection_reason = ""
    record.hrd_date_rejected = None
