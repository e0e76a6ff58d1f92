from app.services.likert import CANONICAL_INSTRUMENT, ScoringDirection


def _answers(forward_label, reverse_label):
    labels = {
        ScoringDirection.FORWARD: forward_label,
        ScoringDirection.REVERSE: reverse_label,
        ScoringDirection.INFORMATIONAL: "Sometimes",
    }
    return [
        {"question_index": i, "selected_label": labels[q.direction]}
        for i, q in enumerate(CANONICAL_INSTRUMENT)
    ]


async def _other_user(client):
    resp = await client.post("/auth/register", json={"email": "other@example.com", "password": "other-pass"})
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


async def test_mood_log_defaults_and_streak(client, auth_headers):
    resp = await client.post("/api/mood-logs", json={"mood": "calm"}, headers=auth_headers)
    assert resp.status_code == 201
    body = resp.json()
    assert body["mood"] == "calm"
    assert body["intensity"] == 5
    assert body["note"] == ""

    streak = (await client.get("/api/streaks", headers=auth_headers)).json()
    assert streak["current_streak"] == 1
    assert streak["last_activity_date"] == "2026-03-10"


async def test_mood_logs_newest_first_across_days(client, auth_headers, clock):
    await client.post("/api/mood-logs", json={"mood": "tired", "intensity": 3}, headers=auth_headers)
    clock.advance(1)
    await client.post(
        "/api/mood-logs",
        json={"mood": "happy", "intensity": 8, "note": "good run"},
        headers=auth_headers,
    )

    logs = (await client.get("/api/mood-logs", headers=auth_headers)).json()
    assert [log["mood"] for log in logs] == ["happy", "tired"]
    assert logs[0]["note"] == "good run"

    streak = (await client.get("/api/streaks", headers=auth_headers)).json()
    assert streak["current_streak"] == 2


async def test_mood_log_validation(client, auth_headers):
    for payload in ({"mood": "angry", "intensity": 11}, {"mood": "angry", "intensity": 0}, {"intensity": 4}):
        resp = await client.post("/api/mood-logs", json=payload, headers=auth_headers)
        assert resp.status_code == 422
    assert (await client.get("/api/mood-logs", headers=auth_headers)).json() == []


async def test_mood_log_delete_is_per_user(client, auth_headers):
    log_id = (await client.post("/api/mood-logs", json={"mood": "calm"}, headers=auth_headers)).json()["id"]
    other = await _other_user(client)

    assert (await client.delete(f"/api/mood-logs/{log_id}", headers=other)).status_code == 404
    assert (await client.get("/api/mood-logs", headers=other)).json() == []

    resp = await client.delete(f"/api/mood-logs/{log_id}", headers=auth_headers)
    assert resp.status_code == 200
    assert (await client.get("/api/mood-logs", headers=auth_headers)).json() == []
    assert (await client.delete(f"/api/mood-logs/{log_id}", headers=auth_headers)).status_code == 404


async def test_journal_create_update_delete(client, auth_headers, clock):
    resp = await client.post("/api/journals", json={"content": "Slept well."}, headers=auth_headers)
    assert resp.status_code == 201
    entry = resp.json()
    assert entry["title"] == "Untitled"
    assert entry["mood"] == "neutral"
    assert entry["created_at"] == entry["updated_at"]

    clock.advance(1)
    resp = await client.put(
        f"/api/journals/{entry['id']}",
        json={"title": "Tuesday", "mood": "happy"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["title"] == "Tuesday"
    assert updated["mood"] == "happy"
    assert updated["content"] == "Slept well."
    assert updated["created_at"].startswith("2026-03-10")
    assert updated["updated_at"] > entry["updated_at"]

    # editing an entry is not a new activity
    streak = (await client.get("/api/streaks", headers=auth_headers)).json()
    assert streak["last_activity_date"] == "2026-03-10"

    assert (await client.delete(f"/api/journals/{entry['id']}", headers=auth_headers)).status_code == 200
    assert (await client.get("/api/journals", headers=auth_headers)).json() == []


async def test_journal_validation(client, auth_headers):
    resp = await client.post("/api/journals", json={"title": "Empty", "content": ""}, headers=auth_headers)
    assert resp.status_code == 422

    entry = (await client.post("/api/journals", json={"content": "Notes"}, headers=auth_headers)).json()
    resp = await client.put(f"/api/journals/{entry['id']}", json={"content": ""}, headers=auth_headers)
    assert resp.status_code == 422
    resp = await client.put(f"/api/journals/{entry['id']}", json={"author": "me"}, headers=auth_headers)
    assert resp.status_code == 422


async def test_journal_is_per_user(client, auth_headers):
    entry = (await client.post("/api/journals", json={"content": "Private"}, headers=auth_headers)).json()
    other = await _other_user(client)

    assert (await client.get("/api/journals", headers=other)).json() == []
    resp = await client.put(f"/api/journals/{entry['id']}", json={"content": "Mine now"}, headers=other)
    assert resp.status_code == 404
    assert (await client.delete(f"/api/journals/{entry['id']}", headers=other)).status_code == 404

    journals = (await client.get("/api/journals", headers=auth_headers)).json()
    assert [j["content"] for j in journals] == ["Private"]


async def test_profile_stats_empty(client, auth_headers):
    resp = await client.get("/api/profile/stats", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "total_assessments": 0,
        "average_score": 0,
        "total_breathing_sessions": 0,
        "total_mood_logs": 0,
        "total_journals": 0,
        "current_streak": 0,
        "longest_streak": 0,
        "effective_streak": 0,
    }


async def test_profile_stats_counts_everything(client, auth_headers, clock):
    # totals 44 and 1: mean 22.5 rounds up
    high = await client.post(
        "/api/assessments", json={"answers": _answers("Very Often", "Never")}, headers=auth_headers
    )
    assert high.json()["total"] == 44
    low_answers = _answers("Never", "Very Often")
    low_answers[0]["selected_label"] = "Almost Never"
    low = await client.post("/api/assessments", json={"answers": low_answers}, headers=auth_headers)
    assert low.json()["total"] == 1

    clock.advance(1)
    await client.post(
        "/api/breathing/sessions",
        json={"duration_seconds": 60, "cycles_completed": 3},
        headers=auth_headers,
    )
    await client.post("/api/mood-logs", json={"mood": "calm"}, headers=auth_headers)
    await client.post("/api/mood-logs", json={"mood": "hopeful"}, headers=auth_headers)
    await client.post("/api/journals", json={"content": "Day two."}, headers=auth_headers)

    other = await _other_user(client)
    await client.post("/api/journals", json={"content": "Not counted."}, headers=other)

    stats = (await client.get("/api/profile/stats", headers=auth_headers)).json()
    assert stats == {
        "total_assessments": 2,
        "average_score": 23,
        "total_breathing_sessions": 1,
        "total_mood_logs": 2,
        "total_journals": 1,
        "current_streak": 2,
        "longest_streak": 2,
        "effective_streak": 2,
    }

    clock.advance(2)
    stats = (await client.get("/api/profile/stats", headers=auth_headers)).json()
    assert stats["current_streak"] == 2
    assert stats["effective_streak"] == 0


async def test_routes_require_auth(client):
    for method, url in (
        ("get", "/api/mood-logs"),
        ("get", "/api/journals"),
        ("get", "/api/profile/stats"),
        ("delete", "/api/journals/1"),
    ):
        resp = await client.request(method.upper(), url)
        assert resp.status_code == 401
