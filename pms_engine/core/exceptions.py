"""
Custom Exceptions - PMS Engine
pms_engine/core/exceptions.py

Error taxonomy shared by the workflow and scoring engines.

Every exception carries a stable ``kind`` so callers can branch on the
failure reason, while the structured subclasses expose the context
(transition, weights, limits) as attributes.
"""

from enum import Enum
from typing import Optional, Type, TypeVar


class ErrorKind(str, Enum):
    # Workflow
    INVALID_WORKFLOW_TRANSITION = "invalid_workflow_transition"
    REJECTION_REASON_REQUIRED = "rejection_reason_required"
    UNAUTHORIZED_APPROVER = "unauthorized_approver"
    ALREADY_APPROVED = "already_approved"
    ALREADY_REJECTED = "already_rejected"

    # Objectives and review periods
    WEIGHTS_NOT_BALANCED = "weights_not_balanced"
    MAX_OBJECTIVES_EXCEEDED = "max_objectives_exceeded"
    INVALID_RANGE_VALUE = "invalid_range_value"

    # Scoring
    NO_SCORE_DATA = "no_score_data"
    INVALID_WEIGHT_CONFIG = "invalid_weight_config"
    SCORE_OUT_OF_RANGE = "score_out_of_range"


class PMSError(Exception):
    """Base exception for engine failures."""

    kind: Optional[ErrorKind] = None
    default_message: str = "performance management error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# =============================================================================
# SENTINEL KINDS
# =============================================================================


class InvalidWorkflowTransitionError(PMSError):
    kind = ErrorKind.INVALID_WORKFLOW_TRANSITION
    default_message = "invalid workflow state transition"


class RejectionReasonRequiredError(PMSError):
    kind = ErrorKind.REJECTION_REASON_REQUIRED
    default_message = "rejection reason is required"


class UnauthorizedApproverError(PMSError):
    kind = ErrorKind.UNAUTHORIZED_APPROVER
    default_message = "caller is not authorized to approve this record"


class AlreadyApprovedError(PMSError):
    kind = ErrorKind.ALREADY_APPROVED
    default_message = "record has already been approved"


class AlreadyRejectedError(PMSError):
    kind = ErrorKind.ALREADY_REJECTED
    default_message = "record has already been rejected"


class WeightsNotBalancedError(PMSError):
    kind = ErrorKind.WEIGHTS_NOT_BALANCED
    default_message = "category weights must sum to 100%"


class MaxObjectivesExceededError(PMSError):
    kind = ErrorKind.MAX_OBJECTIVES_EXCEEDED
    default_message = "maximum number of objectives exceeded"


class InvalidRangeValueError(PMSError):
    kind = ErrorKind.INVALID_RANGE_VALUE
    default_message = "invalid range value for the specified period type"


class NoScoreDataError(PMSError):
    kind = ErrorKind.NO_SCORE_DATA
    default_message = "no score data available for calculation"


class InvalidWeightConfigError(PMSError):
    kind = ErrorKind.INVALID_WEIGHT_CONFIG
    default_message = "invalid weight configuration for scoring"


class ScoreOutOfRangeError(PMSError):
    kind = ErrorKind.SCORE_OUT_OF_RANGE
    default_message = "score value is outside the valid range"


# =============================================================================
# STRUCTURED ERRORS
# =============================================================================


class WorkflowTransitionError(InvalidWorkflowTransitionError):
    """Transition not present in the engine's rule table."""

    def __init__(
        self,
        from_status,
        to_status,
        entity_id: str = "",
        reason: str = "",
    ):
        self.from_status = from_status
        self.to_status = to_status
        self.entity_id = entity_id
        self.reason = reason

        msg = f"cannot transition from {_label(from_status)} to {_label(to_status)}"
        if entity_id:
            msg += f" (entity: {entity_id})"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class WeightValidationError(WeightsNotBalancedError):
    """Category weights do not add up to the expected total."""

    def __init__(self, expected_total, actual_total, category_id: str = ""):
        self.expected_total = expected_total
        self.actual_total = actual_total
        self.category_id = category_id
        super().__init__(
            f"category weights sum to {float(actual_total):.2f}%, "
            f"expected {float(expected_total):.2f}% (category: {category_id})"
        )


class ObjectiveLimitError(MaxObjectivesExceededError):
    """Staff member planned more objectives than the review period allows."""

    def __init__(self, max_objectives: int, current: int, staff_id: str = "", period_id: str = ""):
        self.max = max_objectives
        self.current = current
        self.staff_id = staff_id
        self.period_id = period_id
        super().__init__(
            f"maximum objectives exceeded: {current} of {max_objectives} allowed "
            f"(staff: {staff_id}, period: {period_id})"
        )


class RangeValueError(InvalidRangeValueError):
    """Range value outside what the review period range supports."""

    def __init__(self, period_range, value: int, max_value: int):
        self.period_range = period_range
        self.value = value
        self.max_value = max_value
        super().__init__(
            f"range value {value} is invalid for {_range_name(period_range)} (max: {max_value})"
        )


# =============================================================================
# HOOK FAILURES
# =============================================================================


class WorkflowHookError(PMSError):
    """A transition hook raised; the original exception is the ``__cause__``."""

    stage = "hook"

    def __init__(self, original: BaseException):
        self.original = original
        if isinstance(original, PMSError):
            self.kind = original.kind
        super().__init__(f"{self.stage} failed: {original}")


class BeforeHookError(WorkflowHookError):
    stage = "before-hook"


class AfterHookError(WorkflowHookError):
    stage = "after-hook"


# =============================================================================
# MATCHING HELPERS
# =============================================================================

E = TypeVar("E", bound=BaseException)


def _iter_chain(exc: Optional[BaseException]):
    seen = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        yield exc
        exc = exc.__cause__


def is_error_kind(exc: Optional[BaseException], kind: ErrorKind) -> bool:
    """True if ``exc`` or any exception in its cause chain has ``kind``."""
    return any(getattr(e, "kind", None) == kind for e in _iter_chain(exc))


def find_error(exc: Optional[BaseException], error_type: Type[E]) -> Optional[E]:
    """Return the first exception of ``error_type`` along the cause chain."""
    for e in _iter_chain(exc):
        if isinstance(e, error_type):
            return e
    return None


def _label(value) -> str:
    return getattr(value, "value", str(value))


def _range_name(period_range) -> str:
    name = getattr(period_range, "label", None)
    return name if name else "Unknown"
