"""
workflow/transitions.py

Transition tables for the preconfigured workflow variants.

A rule table is plain data: the engine permits a (from, to) move only when
some rule lists it. Variants differ only in their tables.
"""

from dataclasses import dataclass
from typing import Tuple

from pms_engine.models.enumerations import OperationType as Op
from pms_engine.models.enumerations import Status as S


@dataclass(frozen=True)
class TransitionRule:
    """One permitted move and the operation that triggers it."""
    from_status: S
    to_status: S
    operation: Op

    @property
    def pair(self) -> Tuple[S, S]:
        return self.from_status, self.to_status


TransitionTable = Tuple[TransitionRule, ...]


# Single-level (line-manager) approval used by most entities.
BASE_TRANSITIONS: TransitionTable = (
    # Submission
    TransitionRule(S.DRAFT, S.PENDING_APPROVAL, Op.COMMIT_DRAFT),
    TransitionRule(S.DRAFT, S.PENDING_APPROVAL, Op.ADD),
    # Approval
    TransitionRule(S.PENDING_APPROVAL, S.APPROVED_AND_ACTIVE, Op.APPROVE),
    TransitionRule(S.PENDING_APPROVAL, S.REJECTED, Op.REJECT),
    TransitionRule(S.PENDING_APPROVAL, S.RETURNED, Op.RETURN),
    # Re-submission after return
    TransitionRule(S.RETURNED, S.PENDING_APPROVAL, Op.RE_SUBMIT),
    # Deactivation and reactivation
    TransitionRule(S.APPROVED_AND_ACTIVE, S.DEACTIVATED, Op.CANCEL),
    TransitionRule(S.APPROVED_AND_ACTIVE, S.DEACTIVATED, Op.DELETE),
    TransitionRule(S.DEACTIVATED, S.APPROVED_AND_ACTIVE, Op.REACTIVATE),
    # Closure
    TransitionRule(S.APPROVED_AND_ACTIVE, S.CLOSED, Op.CLOSE),
    TransitionRule(S.ACTIVE, S.CLOSED, Op.CLOSE),
    # Completion
    TransitionRule(S.ACTIVE, S.COMPLETED, Op.COMPLETE),
)


# Two-level approval: line manager first, then HRD.
HRD_TRANSITIONS: TransitionTable = (
    TransitionRule(S.DRAFT, S.PENDING_APPROVAL, Op.COMMIT_DRAFT),
    TransitionRule(S.DRAFT, S.PENDING_APPROVAL, Op.ADD),
    # Line-manager approval escalates to HRD
    TransitionRule(S.PENDING_APPROVAL, S.PENDING_HRD_APPROVAL, Op.APPROVE),
    TransitionRule(S.PENDING_APPROVAL, S.REJECTED, Op.REJECT),
    TransitionRule(S.PENDING_APPROVAL, S.RETURNED, Op.RETURN),
    # HRD-level approval
    TransitionRule(S.PENDING_HRD_APPROVAL, S.APPROVED_AND_ACTIVE, Op.APPROVE),
    TransitionRule(S.PENDING_HRD_APPROVAL, S.REJECTED, Op.REJECT),
    TransitionRule(S.RETURNED, S.PENDING_APPROVAL, Op.RE_SUBMIT),
    TransitionRule(S.APPROVED_AND_ACTIVE, S.DEACTIVATED, Op.CANCEL),
    TransitionRule(S.APPROVED_AND_ACTIVE, S.DEACTIVATED, Op.DELETE),
    TransitionRule(S.DEACTIVATED, S.APPROVED_AND_ACTIVE, Op.REACTIVATE),
    TransitionRule(S.APPROVED_AND_ACTIVE, S.CLOSED, Op.CLOSE),
    TransitionRule(S.ACTIVE, S.CLOSED, Op.CLOSE),
    TransitionRule(S.ACTIVE, S.COMPLETED, Op.COMPLETE),
)


# Review periods: re-submission allowed from Rejected, cancellation instead
# of deactivation.
REVIEW_PERIOD_TRANSITIONS: TransitionTable = (
    TransitionRule(S.DRAFT, S.PENDING_APPROVAL, Op.COMMIT_DRAFT),
    TransitionRule(S.DRAFT, S.PENDING_APPROVAL, Op.ADD),
    TransitionRule(S.PENDING_APPROVAL, S.APPROVED_AND_ACTIVE, Op.APPROVE),
    TransitionRule(S.PENDING_APPROVAL, S.REJECTED, Op.REJECT),
    TransitionRule(S.PENDING_APPROVAL, S.RETURNED, Op.RETURN),
    # Re-submission from both Returned and Rejected
    TransitionRule(S.RETURNED, S.PENDING_APPROVAL, Op.RE_SUBMIT),
    TransitionRule(S.REJECTED, S.PENDING_APPROVAL, Op.RE_SUBMIT),
    TransitionRule(S.APPROVED_AND_ACTIVE, S.CLOSED, Op.CLOSE),
    # An already-active period being formally approved
    TransitionRule(S.ACTIVE, S.APPROVED_AND_ACTIVE, Op.APPROVE),
    # Cancellation
    TransitionRule(S.APPROVED_AND_ACTIVE, S.CANCELLED, Op.CANCEL),
    TransitionRule(S.ACTIVE, S.CANCELLED, Op.CANCEL),
)
