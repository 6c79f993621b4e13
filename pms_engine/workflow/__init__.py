"""
workflow/ - Entity Status Workflow Engine

Modules:
    transitions.py  - Rule tables for the base, HRD and review-period variants
    engine.py       - WorkflowEngine FSM with before/after hooks
    mutations.py    - Approval / rejection / return / reset record helpers
"""

from pms_engine.workflow.engine import (
    TransitionHook,
    WorkflowEngine,
    create_base_engine,
    create_hrd_engine,
    create_review_period_engine,
)
from pms_engine.workflow.mutations import (
    apply_approval,
    apply_hrd_approval,
    apply_hrd_rejection,
    apply_rejection,
    apply_return,
    reset_hrd_workflow,
    reset_workflow,
)
from pms_engine.workflow.transitions import TransitionRule

__all__ = [
    "TransitionHook",
    "TransitionRule",
    "WorkflowEngine",
    "create_base_engine",
    "create_hrd_engine",
    "create_review_period_engine",
    "apply_approval",
    "apply_hrd_approval",
    "apply_hrd_rejection",
    "apply_rejection",
    "apply_return",
    "reset_hrd_workflow",
    "reset_workflow",
]
