"""API tests for the update -> impact report -> review -> course flow."""

import pytest

pytestmark = pytest.mark.integration


async def _fetch_and_analyze(api_client):
    fetched = await api_client.post("/api/updates/fetch")
    assert fetched.status_code == 200
    assert fetched.json()["total"] == 5

    analyzed = await api_client.post("/api/impact-reports/analyze")
    assert analyzed.status_code == 200
    return analyzed.json()["data"]["reports"]


async def test_fetch_is_idempotent(api_client):
    await api_client.post("/api/updates/fetch")
    again = await api_client.post("/api/updates/fetch")

    assert again.json()["total"] == 5
    listed = await api_client.get("/api/updates")
    assert listed.json()["total"] == 5


async def test_analyze_single_update(api_client):
    fetched = await api_client.post("/api/updates/fetch")
    update_id = fetched.json()["data"][0]["id"]

    response = await api_client.post(f"/api/updates/{update_id}/analyze")

    assert response.status_code == 200
    report = response.json()["data"]
    assert report["update_id"] == update_id
    assert report["status"] == "new"

    update = await api_client.get(f"/api/updates/{update_id}")
    assert update.json()["data"]["processed"] is True

    missing = await api_client.post("/api/updates/missing/analyze")
    assert missing.status_code == 404


async def test_batch_analysis_and_filters(api_client):
    reports = await _fetch_and_analyze(api_client)
    assert len(reports) == 5

    stats = await api_client.get("/api/impact-reports/stats")
    assert stats.json()["data"]["total"] == 5

    claude = await api_client.get("/api/impact-reports", params={"provider": "Claude"})
    assert claude.json()["total"] == 1

    again = await api_client.post("/api/impact-reports/analyze")
    assert again.json()["data"] == {"reports": [], "failures": []}


async def test_review_actions(api_client):
    reports = await _fetch_and_analyze(api_client)
    first, second, third = reports[0]["id"], reports[1]["id"], reports[2]["id"]

    approved = await api_client.post(f"/api/impact-reports/{first}/approve", json={"actor": "alice"})
    assert approved.status_code == 200
    assert approved.json()["data"]["status"] == "approved"
    assert approved.json()["data"]["reviewed_by"] == "alice"

    rejected = await api_client.post(f"/api/impact-reports/{second}/reject")
    assert rejected.json()["data"]["reviewed_by"] == "anonymous"

    assigned = await api_client.post(f"/api/impact-reports/{first}/assign", json={"assignee": "bob", "actor": "alice"})
    assert assigned.json()["data"]["assignee"] == "bob"
    assert assigned.json()["data"]["status"] == "assigned"

    done = await api_client.post(f"/api/impact-reports/{third}/done", json={"actor": "carol"})
    assert done.json()["data"]["status"] == "done"

    trail = await api_client.get(f"/api/audit-logs/impact_report/{first}")
    assert [entry["action"] for entry in trail.json()["data"]] == ["assign", "approve", "create"]

    approvals = await api_client.get("/api/audit-logs", params={"action": "approve"})
    assert approvals.json()["total"] == 1


async def test_assign_without_assignee_is_bad_request(api_client):
    reports = await _fetch_and_analyze(api_client)

    response = await api_client.post(f"/api/impact-reports/{reports[0]['id']}/assign", json={"assignee": " "})

    assert response.status_code == 400
    assert response.json()["error"] == {"code": "BAD_REQUEST", "message": "Assignee is required"}


async def test_approve_unknown_report(api_client):
    response = await api_client.post("/api/impact-reports/missing/approve", json={"actor": "alice"})
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


async def test_generate_course_from_approved_reports(api_client):
    reports = await _fetch_and_analyze(api_client)
    chosen = [report["id"] for report in reports[:2]]
    for report_id in chosen:
        await api_client.post(f"/api/impact-reports/{report_id}/approve", json={"actor": "alice"})

    response = await api_client.post("/api/courses/generate", json={"report_ids": chosen})

    assert response.status_code == 201
    result = response.json()["data"]
    assert result["reports_processed"] == 2
    course_id = result["course"]["id"]

    lessons = await api_client.get(f"/api/courses/{course_id}/lessons")
    assert [lesson["position"] for lesson in lessons.json()["data"]] == [1, 2]

    courses = await api_client.get("/api/courses")
    assert courses.json()["total"] == 1

    for report_id in chosen:
        report = await api_client.get(f"/api/impact-reports/{report_id}")
        assert report.json()["data"]["status"] == "done"


async def test_generate_course_without_approved_reports(api_client):
    response = await api_client.post("/api/courses/generate")
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BAD_REQUEST"


async def test_mapping_rule_versioning(api_client):
    created = await api_client.post(
        "/api/mapping-rules",
        json={"question_id": "Q2", "answer_value": "Student", "recommended_track": "high_school", "actor": "alice"},
    )
    assert created.status_code == 201
    v1 = created.json()["data"]
    assert v1["version"] == 1
    assert v1["created_by"] == "alice"

    duplicate = await api_client.post("/api/mapping-rules", json={"question_id": "Q2", "answer_value": "Student"})
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "CONFLICT"

    v2 = (await api_client.put(f"/api/mapping-rules/{v1['id']}", json={"priority": 7, "actor": "bob"})).json()["data"]
    v3 = (await api_client.put(f"/api/mapping-rules/{v2['id']}", json={"recommended_course": "AI 101"})).json()["data"]
    assert v3["version"] == 3
    assert v3["priority"] == 7
    assert v3["recommended_track"] == "high_school"

    stale = await api_client.put(f"/api/mapping-rules/{v1['id']}", json={"priority": 1})
    assert stale.status_code == 409

    history = await api_client.get("/api/mapping-rules/history/Q2/Student")
    assert [rule["version"] for rule in history.json()["data"]] == [3, 2, 1]
    assert [rule["is_active"] for rule in history.json()["data"]] == [True, False, False]

    active = await api_client.get("/api/mapping-rules", params={"is_active": True})
    assert [rule["id"] for rule in active.json()["data"]] == [v3["id"]]

    detail = await api_client.get(f"/api/mapping-rules/{v1['id']}")
    assert detail.json()["data"]["is_active"] is False


async def test_mapping_rule_key_is_immutable(api_client):
    created = await api_client.post("/api/mapping-rules", json={"question_id": "Q1", "answer_value": "Yes"})
    response = await api_client.put(
        f"/api/mapping-rules/{created.json()['data']['id']}",
        json={"answer_value": "No"},
    )
    assert response.status_code == 400
