"""Integration tests for the impact report review workflow."""

import pytest

from curriculum_ops.core.exceptions import BadRequestError, InvalidTransitionError, NotFoundError
from curriculum_ops.domain.review import ReportStatus, strict_transition_policy
from curriculum_ops.services.analyzer import ImpactAnalyzer
from curriculum_ops.services.review_service import ReviewService

pytestmark = pytest.mark.integration


@pytest.fixture
async def report(seeded_store, make_update):
    update = await make_update(title="Introducing projects")
    return await ImpactAnalyzer(seeded_store).analyze(update)


@pytest.fixture
def review(seeded_store):
    return ReviewService(seeded_store)


async def _trail(store, report_id):
    async with store.transaction() as catalog:
        return await catalog.audit_logs.for_entity("impact_report", report_id)


async def test_approve_records_reviewer_and_one_audit_row(seeded_store, review, report):
    approved = await review.approve(report.id, actor="alice")

    assert approved.status == ReportStatus.APPROVED
    assert approved.reviewed_by == "alice"
    assert approved.reviewed_at is not None

    approvals = [entry for entry in await _trail(seeded_store, report.id) if entry.action == "approve"]
    assert len(approvals) == 1
    assert approvals[0].actor == "alice"
    assert approvals[0].previous_value == {"status": "new"}
    assert approvals[0].new_value == {"status": "approved"}


async def test_reject_and_done(seeded_store, review, report):
    await review.reject(report.id, actor="carol")
    done = await review.mark_done(report.id, actor="carol")

    assert done.status == ReportStatus.DONE
    actions = [entry.action for entry in await _trail(seeded_store, report.id)]
    assert actions == ["update", "reject", "create"]


async def test_missing_actor_falls_back_to_default(seeded_store, report):
    review = ReviewService(seeded_store, default_actor="ops-bot")
    approved = await review.approve(report.id)
    assert approved.reviewed_by == "ops-bot"


async def test_assign_sets_assignee_and_status(seeded_store, review, report):
    assigned = await review.assign(report.id, "  bob  ", actor="alice")

    assert assigned.status == ReportStatus.ASSIGNED
    assert assigned.assignee == "bob"
    trail = await _trail(seeded_store, report.id)
    assert trail[0].action == "assign"
    assert trail[0].new_value == {"assignee": "bob"}


@pytest.mark.parametrize("assignee", [None, "", "   "])
async def test_assign_requires_assignee(seeded_store, review, report, assignee):
    with pytest.raises(BadRequestError, match="Assignee is required"):
        await review.assign(report.id, assignee, actor="alice")
    assert len(await _trail(seeded_store, report.id)) == 1


async def test_unknown_report(review):
    with pytest.raises(NotFoundError):
        await review.approve("missing", actor="alice")
    with pytest.raises(NotFoundError):
        await review.assign("missing", "bob")


async def test_permissive_policy_allows_reopening(review, report):
    await review.mark_done(report.id, actor="alice")
    reopened = await review.update_status(report.id, ReportStatus.NEW, actor="alice")
    assert reopened.status == ReportStatus.NEW


async def test_strict_policy_rejects_illegal_transition(seeded_store, report):
    review = ReviewService(seeded_store, policy=strict_transition_policy)

    with pytest.raises(InvalidTransitionError):
        await review.mark_done(report.id, actor="alice")
    with pytest.raises(InvalidTransitionError):
        await review.assign(report.id, "bob", actor="alice")

    await review.approve(report.id, actor="alice")
    await review.assign(report.id, "bob", actor="alice")
    done = await review.mark_done(report.id, actor="bob")
    assert done.status == ReportStatus.DONE

    with pytest.raises(InvalidTransitionError):
        await review.approve(report.id, actor="alice")


async def test_strict_policy_from_settings(seeded_store, report, monkeypatch):
    from curriculum_ops.core.config import get_settings

    monkeypatch.setenv("STRICT_REVIEW_TRANSITIONS", "true")
    get_settings.cache_clear()

    review = ReviewService(seeded_store)
    with pytest.raises(InvalidTransitionError):
        await review.mark_done(report.id)
