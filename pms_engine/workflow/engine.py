"""
workflow/engine.py

Finite-state machine that validates and executes status transitions for
workflow-bearing entities.

The rule table is fixed at construction. Each engine owns one optional
before-hook and one optional after-hook:

    hook(entity_id, from_status, to_status, actor_id) -> None

A hook signals failure by raising. A failing before-hook aborts the
transition; a failing after-hook is reported although the transition has
already logically happened. The engine persists nothing.
"""

from typing import Callable, FrozenSet, Iterable, List, Optional, Tuple, Union

import structlog

from pms_engine.core.exceptions import AfterHookError, BeforeHookError, WorkflowTransitionError
from pms_engine.models.enumerations import OperationType, Status
from pms_engine.workflow.transitions import (
    BASE_TRANSITIONS,
    HRD_TRANSITIONS,
    REVIEW_PERIOD_TRANSITIONS,
    TransitionRule,
)

logger = structlog.get_logger(__name__)

TransitionHook = Callable[[str, Status, Status, str], None]
StatusLike = Union[Status, str]

NO_MATCHING_RULE = "no matching transition rule"


class WorkflowEngine:
    """Validate and execute transitions against a fixed rule table."""

    def __init__(self, transitions: Iterable[TransitionRule], name: str = "custom"):
        self.name = name
        self._transitions: Tuple[TransitionRule, ...] = tuple(transitions)
        self._allowed: FrozenSet[Tuple[Status, Status]] = frozenset(
            rule.pair for rule in self._transitions
        )
        self._on_before: Optional[TransitionHook] = None
        self._on_after: Optional[TransitionHook] = None

    @property
    def transitions(self) -> Tuple[TransitionRule, ...]:
        return self._transitions

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def set_before_hook(self, hook: Optional[TransitionHook]) -> None:
        """Replace the before-hook. ``None`` clears it."""
        self._on_before = hook

    def set_after_hook(self, hook: Optional[TransitionHook]) -> None:
        """Replace the after-hook. ``None`` clears it."""
        self._on_after = hook

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def validate_transition(
        self,
        from_status: StatusLike,
        to_status: StatusLike,
        entity_id: str = "",
        reason: Optional[str] = None,
    ) -> None:
        """
        Raise WorkflowTransitionError unless the move is in the rule table.

        Raises:
            ValueError: a status string outside the ``Status`` vocabulary.
        """
        src, dst = Status(from_status), Status(to_status)
        if (src, dst) not in self._allowed:
            raise WorkflowTransitionError(
                from_status=src,
                to_status=dst,
                entity_id=entity_id,
                reason=reason or NO_MATCHING_RULE,
            )

    def can_transition(self, from_status: StatusLike, to_status: StatusLike) -> bool:
        return (Status(from_status), Status(to_status)) in self._allowed

    def get_valid_transitions(self, from_status: StatusLike) -> List[TransitionRule]:
        """All rules leaving ``from_status``, in table order. Useful for action menus."""
        src = Status(from_status)
        return [rule for rule in self._transitions if rule.from_status == src]

    def get_allowed_operations(self, from_status: StatusLike) -> List[OperationType]:
        operations: List[OperationType] = []
        for rule in self.get_valid_transitions(from_status):
            if rule.operation not in operations:
                operations.append(rule.operation)
        return operations

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(
        self,
        entity_id: str,
        from_status: StatusLike,
        to_status: StatusLike,
        actor_id: str,
    ) -> None:
        """
        Validate the transition and run the hooks around it.

        Raises:
            WorkflowTransitionError: move not allowed; no hook runs.
            BeforeHookError: before-hook raised; after-hook is skipped.
            AfterHookError: after-hook raised; the transition already happened.
        """
        src, dst = Status(from_status), Status(to_status)
        log = logger.bind(
            workflow=self.name,
            entity_id=entity_id,
            actor_id=actor_id,
            from_status=src.value,
            to_status=dst.value,
        )

        try:
            self.validate_transition(src, dst, entity_id=entity_id)
        except WorkflowTransitionError:
            log.warning("workflow_transition_denied")
            raise

        if self._on_before is not None:
            try:
                self._on_before(entity_id, src, dst, actor_id)
            except Exception as exc:
                log.warning("workflow_before_hook_failed", error=str(exc))
                raise BeforeHookError(exc) from exc

        log.info("workflow_transition_executed")

        if self._on_after is not None:
            try:
                self._on_after(entity_id, src, dst, actor_id)
            except Exception as exc:
                log.error("workflow_after_hook_failed", error=str(exc))
                raise AfterHookError(exc) from exc


# =============================================================================
# PRECONFIGURED VARIANTS
# =============================================================================


def create_base_engine() -> WorkflowEngine:
    """Single-level (line-manager) approval lifecycle."""
    return WorkflowEngine(BASE_TRANSITIONS, name="base")


def create_hrd_engine() -> WorkflowEngine:
    """Two-level approval lifecycle: line manager, then HRD."""
    return WorkflowEngine(HRD_TRANSITIONS, name="hrd")


def create_review_period_engine() -> WorkflowEngine:
    """Review-period lifecycle with re-submission from Rejected and cancellation."""
    return WorkflowEngine(REVIEW_PERIOD_TRANSITIONS, name="review_period")
