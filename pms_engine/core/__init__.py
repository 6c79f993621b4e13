"""
Core Package - PMS Engine
pms_engine/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from pms_engine.core.exceptions import (
    AfterHookError,
    AlreadyApprovedError,
    AlreadyRejectedError,
    BeforeHookError,
    ErrorKind,
    InvalidRangeValueError,
    InvalidWeightConfigError,
    InvalidWorkflowTransitionError,
    MaxObjectivesExceededError,
    NoScoreDataError,
    ObjectiveLimitError,
    PMSError,
    RangeValueError,
    RejectionReasonRequiredError,
    ScoreOutOfRangeError,
    UnauthorizedApproverError,
    WeightsNotBalancedError,
    WeightValidationError,
    WorkflowHookError,
    WorkflowTransitionError,
    find_error,
    is_error_kind,
)
from pms_engine.core.logging_config import configure_logging

__all__ = [
    # Exceptions
    "AfterHookError",
    "AlreadyApprovedError",
    "AlreadyRejectedError",
    "BeforeHookError",
    "ErrorKind",
    "InvalidRangeValueError",
    "InvalidWeightConfigError",
    "InvalidWorkflowTransitionError",
    "MaxObjectivesExceededError",
    "NoScoreDataError",
    "ObjectiveLimitError",
    "PMSError",
    "RangeValueError",
    "RejectionReasonRequiredError",
    "ScoreOutOfRangeError",
    "UnauthorizedApproverError",
    "WeightsNotBalancedError",
    "WeightValidationError",
    "WorkflowHookError",
    "WorkflowTransitionError",
    "find_error",
    "is_error_kind",
    # Logging
    "configure_logging",
]
