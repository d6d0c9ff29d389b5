"""
Review lifecycle of a logbook entry.

    Pending ──review──▶ Approved | Needs Correction
       ▲                          │
       └──────── delegate edit ───┘

Teachers may review an entry again after a verdict; delegates may edit an
entry in any state, which always sends it back to Pending.
"""
import logging
from typing import Dict, Set

from logbook_project.exceptions import InvalidTransitionError

from .models import LogbookEntry

logger = logging.getLogger(__name__)

ReviewStatus = LogbookEntry.ReviewStatus

PENDING = ReviewStatus.PENDING.value
APPROVED = ReviewStatus.APPROVED.value
NEEDS_CORRECTION = ReviewStatus.NEEDS_CORRECTION.value

# Targets a teacher's review may set, keyed by the current state.
REVIEW_TRANSITIONS: Dict[str, Set[str]] = {
    PENDING: {APPROVED, NEEDS_CORRECTION},
    APPROVED: {APPROVED, NEEDS_CORRECTION},
    NEEDS_CORRECTION: {APPROVED, NEEDS_CORRECTION},
}

# Where a delegate edit leads, keyed by the current state.
EDIT_TRANSITIONS: Dict[str, str] = {
    PENDING: PENDING,
    APPROVED: PENDING,
    NEEDS_CORRECTION: PENDING,
}


def can_review(current: str, target: str) -> bool:
    if not isinstance(target, str):
        return False
    return str(target) in REVIEW_TRANSITIONS.get(str(current), set())


def check_review_transition(current: str, target: str) -> str:
    """Return the validated target state or raise ``InvalidTransitionError``."""
    if not can_review(current, target):
        raise InvalidTransitionError(
            "Invalid review status provided.",
            details={"from": current, "to": target},
        )
    if str(current) != PENDING:
        logger.warning(f"Re-review of an entry already {current}; moving to {target}")
    return str(target)


def is_approval_edge(current: str, target: str) -> bool:
    """True only when an entry enters Approved from another state."""
    return str(target) == APPROVED and str(current) != APPROVED


def edit_target(current: str) -> str:
    return EDIT_TRANSITIONS.get(str(current), PENDING)
