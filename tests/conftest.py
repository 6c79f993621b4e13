# tests/conftest.py

"""
Pytest Fixtures - Shared engines and records for the workflow and scoring tests
"""

import pytest

from pms_engine.config import Settings
from pms_engine.models.enumerations import Status
from pms_engine.models.workflow import HrdWorkflowRecord, WorkflowRecord
from pms_engine.scoring.engine import ScoringEngine
from pms_engine.workflow.engine import (
    create_base_engine,
    create_hrd_engine,
    create_review_period_engine,
)


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture
def settings():
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


# =============================================================================
# WORKFLOW ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def base_engine():
    return create_base_engine()


@pytest.fixture
def hrd_engine():
    return create_hrd_engine()


@pytest.fixture
def review_engine():
    return create_review_period_engine()


@pytest.fixture
def hook_calls():
    """Collects (stage, entity_id, from, to, actor_id) tuples from recording hooks."""
    return []


@pytest.fixture
def recording_hook(hook_calls):
    def make(stage):
        def hook(entity_id, from_status, to_status, actor_id):
            hook_calls.append((stage, entity_id, from_status, to_status, actor_id))
        return hook
    return make


# =============================================================================
# RECORD FIXTURES
# =============================================================================

@pytest.fixture
def pending_record():
    """Freshly submitted record awaiting approval."""
    return WorkflowRecord(record_status=Status.PENDING_APPROVAL.value)


@pytest.fixture
def hrd_record():
    return HrdWorkflowRecord(record_status=Status.PENDING_HRD_APPROVAL.value)


# =============================================================================
# SCORING FIXTURES
# =============================================================================

@pytest.fixture
def scoring_engine(settings):
    return ScoringEngine(settings)
