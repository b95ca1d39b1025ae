from datetime import date, timedelta
from fastapi.testclient import TestClient
from liftlog.main import app
import uuid

client = TestClient(app)
def uniq(prefix="x"): return f"{prefix}-{uuid.uuid4().hex[:8]}"

def make_exercise():
    g = client.post("/groups", json={"name": uniq("grp")}).json()
    r = client.post("/exercises", json={"name": uniq("ex"), "group_id": g["id"]})
    assert r.status_code == 201, r.text
    return r.json()

def test_log_entry_defaults_to_today_and_stores_effort():
    ex = make_exercise()
    r = client.post("/entries", json={"exercise_id": ex["id"], "weight_kg": 80, "reps": 10})
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["workout_date"] == date.today().isoformat()
    assert body["effort"] == 800
    assert body["weight_kg"] == 80

def test_fractional_weight_effort():
    ex = make_exercise()
    r = client.post("/entries", json={"exercise_id": ex["id"], "weight_kg": "62.5", "reps": 3,
                                      "workout_date": "2026-01-10"})
    assert r.status_code == 201, r.text
    assert r.json()["effort"] == 187.5

def test_missing_fields_rejected():
    ex = make_exercise()
    assert client.post("/entries", json={"exercise_id": ex["id"], "reps": 3}).status_code == 422
    assert client.post("/entries", json={"exercise_id": ex["id"], "weight_kg": 10}).status_code == 422
    assert client.post("/entries", json={"exercise_id": ex["id"], "weight_kg": 10, "reps": 0}).status_code == 422
    assert client.post("/entries", json={"exercise_id": ex["id"], "weight_kg": "1.005", "reps": 1}).status_code == 422

def test_unknown_exercise_404():
    r = client.post("/entries", json={"exercise_id": str(uuid.uuid4()), "weight_kg": 10, "reps": 1})
    assert r.status_code == 404

def test_list_entries_ordered_and_filtered():
    ex = make_exercise()
    for d in ("2026-01-12", "2026-01-10", "2026-01-11"):
        client.post("/entries", json={"exercise_id": ex["id"], "weight_kg": 10, "reps": 1, "workout_date": d})
    body = client.get("/entries", params={"exercise_id": ex["id"]}).json()
    assert [e["workout_date"] for e in body] == ["2026-01-10", "2026-01-11", "2026-01-12"]

    body = client.get("/entries", params={"exercise_id": ex["id"], "start": "2026-01-11", "end": "2026-01-11"}).json()
    assert [e["workout_date"] for e in body] == ["2026-01-11"]

def test_update_entry_recomputes_effort():
    ex = make_exercise()
    entry = client.post("/entries", json={"exercise_id": ex["id"], "weight_kg": 100, "reps": 5}).json()
    r = client.patch(f"/entries/{entry['id']}", json={"reps": 8})
    assert r.status_code == 200, r.text
    assert r.json()["effort"] == 800

    yesterday = (date.today() - timedelta(days=1)).isoformat()
    r = client.patch(f"/entries/{entry['id']}", json={"workout_date": yesterday})
    assert r.json()["workout_date"] == yesterday

def test_update_entry_validation():
    ex = make_exercise()
    entry = client.post("/entries", json={"exercise_id": ex["id"], "weight_kg": 100, "reps": 5}).json()
    assert client.patch(f"/entries/{entry['id']}", json={}).status_code == 422
    assert client.patch(f"/entries/{entry['id']}", json={"reps": None}).status_code == 422
    assert client.patch(f"/entries/{uuid.uuid4()}", json={"reps": 2}).status_code == 404

def test_delete_entry():
    ex = make_exercise()
    entry = client.post("/entries", json={"exercise_id": ex["id"], "weight_kg": 10, "reps": 1}).json()
    assert client.delete(f"/entries/{entry['id']}").status_code == 204
    assert client.delete(f"/entries/{entry['id']}").status_code == 404

def test_effort_preview():
    r = client.get("/entries/preview", params={"weight_kg": "82.5", "reps": 8})
    assert r.status_code == 200
    assert r.json() == {"weight_kg": 82.5, "reps": 8, "effort": 660.0}
    assert client.get("/entries/preview", params={"weight_kg": 0, "reps": 8}).status_code == 422
