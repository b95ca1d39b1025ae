from fastapi.testclient import TestClient
from liftlog.main import app
import uuid

client = TestClient(app)
def uniq(prefix="g"): return f"{prefix}-{uuid.uuid4().hex[:8]}"

def make_group(name=None):
    r = client.post("/groups", json={"name": name or uniq("group")})
    assert r.status_code == 201, r.text
    return r.json()

def make_exercise(group_id, name=None):
    r = client.post("/exercises", json={"name": name or uniq("ex"), "group_id": group_id})
    assert r.status_code == 201, r.text
    return r.json()

def test_create_group_trims_name():
    name = uniq("Chest")
    g = make_group(f"  {name}  ")
    assert g["name"] == name
    assert g["exercise_count"] == 0

def test_blank_group_name_rejected():
    assert client.post("/groups", json={"name": "   "}).status_code == 422
    assert client.post("/groups", json={}).status_code == 422

def test_duplicate_group_400():
    name = uniq("Back")
    make_group(name)
    r = client.post("/groups", json={"name": name})
    assert r.status_code == 400
    assert "already exists" in r.json()["detail"]

def test_list_groups_sorted_with_counts():
    g = make_group(uniq("aaa"))
    make_exercise(g["id"])
    make_exercise(g["id"])
    groups = client.get("/groups").json()
    names = [x["name"] for x in groups]
    assert names == sorted(names)
    mine = next(x for x in groups if x["id"] == g["id"])
    assert mine["exercise_count"] == 2

def test_exercise_needs_existing_group():
    r = client.post("/exercises", json={"name": uniq("ex"), "group_id": str(uuid.uuid4())})
    assert r.status_code == 404

def test_duplicate_exercise_400():
    g = make_group()
    name = uniq("Squat")
    make_exercise(g["id"], name)
    r = client.post("/exercises", json={"name": name, "group_id": g["id"]})
    assert r.status_code == 400

def test_list_exercises_by_group_with_group_name():
    g = make_group()
    ex = make_exercise(g["id"])
    r = client.get("/exercises", params={"group_id": g["id"]})
    assert r.status_code == 200
    body = r.json()
    assert [e["id"] for e in body] == [ex["id"]]
    assert body[0]["group_name"] == g["name"]

def test_group_with_exercises_cannot_be_deleted():
    g = make_group()
    ex = make_exercise(g["id"])
    r = client.delete(f"/groups/{g['id']}")
    assert r.status_code == 409
    assert g["name"] in r.json()["detail"]

    # once empty it goes
    assert client.delete(f"/exercises/{ex['id']}").status_code == 204
    assert client.delete(f"/groups/{g['id']}").status_code == 204
    assert client.delete(f"/groups/{g['id']}").status_code == 404

def test_deleting_exercise_removes_its_entries():
    g = make_group()
    ex = make_exercise(g["id"])
    r = client.post("/entries", json={"exercise_id": ex["id"], "weight_kg": 50, "reps": 5})
    assert r.status_code == 201
    entry_id = r.json()["id"]

    assert client.delete(f"/exercises/{ex['id']}").status_code == 204
    assert client.get("/entries", params={"exercise_id": ex["id"]}).json() == []
    assert client.delete(f"/entries/{entry_id}").status_code == 404

def test_delete_unknown_exercise_404():
    assert client.delete(f"/exercises/{uuid.uuid4()}").status_code == 404

def test_reserved_exercise_name_rejected():
    g = make_group()
    for name in ("label", " Label "):
        r = client.post("/exercises", json={"name": name, "group_id": g["id"]})
        assert r.status_code == 422, r.text
