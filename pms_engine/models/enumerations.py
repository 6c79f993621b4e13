from enum import Enum


class Status(str, Enum):
    """Lifecycle state of a record, stored as-is in ``record_status``."""
    DRAFT = "Draft"
    PENDING_APPROVAL = "PendingApproval"
    APPROVED_AND_ACTIVE = "ApprovedAndActive"
    RETURNED = "Returned"
    REJECTED = "Rejected"
    AWAITING_EVALUATION = "AwaitingEvaluation"
    COMPLETED = "Completed"
    PAUSED = "Paused"
    CANCELLED = "Cancelled"
    BREACHED = "Breached"
    DEACTIVATED = "Deactivated"
    ALL = "All"
    CLOSED = "Closed"
    PENDING_ACCEPTANCE = "PendingAcceptance"
    ACTIVE = "Active"
    PENDING_RESOLUTION = "PendingResolution"
    RESOLVED_AWAITING_FEEDBACK = "ResolvedAwaitingFeedback"
    ESCALATED = "Escalated"
    AWAITING_RESPONDENT_COMMENT = "AwaitingRespondentComment"
    PENDING_HOD_REVIEW = "PendingHODReview"
    PENDING_BU_HEAD_REVIEW = "PendingBUHeadReview"
    PENDING_HRD_REVIEW = "PendingHRDReview"
    PENDING_HRD_APPROVAL = "PendingHRDApproval"
    SUSPENSION_PENDING_APPROVAL = "SuspensionPendingApproval"
    RE_EVALUATE = "ReEvaluate"


class OperationType(str, Enum):
    ADD = "Add"
    UPDATE = "Update"
    DELETE = "Delete"
    DRAFT = "Draft"
    COMMIT_DRAFT = "CommitDraft"
    APPROVE = "Approve"
    REJECT = "Reject"
    CANCEL = "Cancel"
    COMPLETE = "Complete"
    PAUSE = "Pause"
    CLOSE = "Close"
    RE_SUBMIT = "ReSubmit"
    RETURN = "Return"
    ACCEPT = "Accept"
    RE_EVALUATE = "ReEvaluate"
    REACTIVATE = "Reactivate"
    SUSPEND = "Suspend"


class PerformanceGrade(str, Enum):
    PROBATION = "Probation"
    DEVELOPING = "Developing"
    PROGRESSIVE = "Progressive"
    COMPETENT = "Competent"
    ACCOMPLISHED = "Accomplished"
    EXEMPLARY = "Exemplary"


class ReviewPeriodRange(int, Enum):
    QUARTERLY = 1
    BI_ANNUAL = 2
    ANNUAL = 3

    @property
    def label(self) -> str:
        return {
            ReviewPeriodRange.QUARTERLY: "Quarterly",
            ReviewPeriodRange.BI_ANNUAL: "BiAnnual",
            ReviewPeriodRange.ANNUAL: "Annual",
        }[self]
