"""Impact report review state machine.

Pure domain functions. The review service asks a TransitionPolicy whether a
status change is allowed; swapping the policy never touches callers.
"""

from collections.abc import Callable
from enum import StrEnum


class ReportStatus(StrEnum):
    """Impact report lifecycle states."""

    NEW = "new"
    APPROVED = "approved"
    REJECTED = "rejected"
    ASSIGNED = "assigned"
    DONE = "done"


# Intended lifecycle. Only enforced by strict_transition_policy.
TRANSITIONS: dict[ReportStatus, list[ReportStatus]] = {
    ReportStatus.NEW: [ReportStatus.APPROVED, ReportStatus.REJECTED],
    ReportStatus.APPROVED: [ReportStatus.ASSIGNED, ReportStatus.DONE],
    ReportStatus.ASSIGNED: [ReportStatus.DONE],
    ReportStatus.REJECTED: [],  # Terminal state
    ReportStatus.DONE: [],  # Terminal state
}

TransitionPolicy = Callable[[ReportStatus, ReportStatus], bool]


def permissive_transition_policy(current: ReportStatus, target: ReportStatus) -> bool:
    """Default policy: any status may follow any other."""
    return True


def strict_transition_policy(current: ReportStatus, target: ReportStatus) -> bool:
    """Only the transitions listed in TRANSITIONS are allowed."""
    return target in TRANSITIONS.get(current, [])


def select_transition_policy(strict: bool) -> TransitionPolicy:
    return strict_transition_policy if strict else permissive_transition_policy


def is_terminal(status: ReportStatus) -> bool:
    return not TRANSITIONS.get(status)


def audit_action_for_status(status: ReportStatus) -> str:
    """Audit action recorded for a status change."""
    if status == ReportStatus.APPROVED:
        return "approve"
    if status == ReportStatus.REJECTED:
        return "reject"
    return "update"
