from fastapi.testclient import TestClient
from backend.app import app


client = TestClient(app)


def _new_game(**body):
    r = client.post("/new-game", json=body)
    assert r.status_code == 200
    data = r.json()
    return data["sessionId"], data["state"]


def _secret_keys(sid):
    r = client.get(f"/reveal/{sid}")
    assert r.status_code == 200
    return [c["key"] for c in r.json()["secret"]]


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json().get("ok") is True


def test_palette():
    r = client.get("/palette")
    assert r.status_code == 200
    data = r.json()
    assert data["codeLength"] == 4
    assert data["maxTurns"] == 10
    assert [c["name"] for c in data["colors"]] == ["Deep Purple", "Plum", "Coral", "Neon Pink"]


def test_new_game_hides_secret():
    sid, state = _new_game()
    assert state["status"] == "playing"
    assert state["secret"] is None
    assert state["turnsUsed"] == 0
    r = client.get(f"/state/{sid}")
    assert r.status_code == 200
    assert r.json()["state"]["secret"] is None


def test_win_flow_via_reveal():
    sid, _ = _new_game(seed=11)
    for key in _secret_keys(sid):
        r = client.post("/pick", json={"sessionId": sid, "color": key})
        assert r.status_code == 200
    r = client.post("/submit", json={"sessionId": sid})
    assert r.status_code == 200
    state = r.json()["state"]
    assert state["status"] == "won"
    assert state["turnsUsed"] == 1
    assert state["history"][0]["exact"] == 4
    assert state["currentGuess"] == []


def test_incomplete_submit_is_rejected_not_error():
    sid, _ = _new_game()
    client.post("/pick", json={"sessionId": sid, "color": "#3B0855"})
    r = client.post("/submit", json={"sessionId": sid})
    assert r.status_code == 200
    state = r.json()["state"]
    assert state["rejected"] == "incomplete_guess"
    assert state["turnsUsed"] == 0
    assert len(state["currentGuess"]) == 1


def test_unknown_color_is_ignored():
    sid, _ = _new_game()
    r = client.post("/pick", json={"sessionId": sid, "color": "#000000"})
    assert r.status_code == 200
    assert r.json()["state"]["currentGuess"] == []


def test_undo_reset_and_toggles():
    sid, _ = _new_game(variant="unique", seed=3)
    client.post("/pick", json={"sessionId": sid, "color": "#852467"})
    r = client.post("/undo", json={"sessionId": sid})
    assert r.json()["state"]["currentGuess"] == []
    r = client.post("/toggle-sound", json={"sessionId": sid})
    assert r.json()["state"]["prefs"]["soundOn"] is False
    r = client.post("/toggle-theme", json={"sessionId": sid})
    assert r.json()["state"]["prefs"]["theme"] == "dark"
    r = client.post("/reset", json={"sessionId": sid})
    state = r.json()["state"]
    assert state["turnsUsed"] == 0
    assert state["config"]["variant"] == "unique"
    assert state["prefs"]["soundOn"] is False


def test_unknown_session_and_bad_body():
    r = client.get("/state/nope")
    assert r.status_code == 404
    r = client.post("/submit", json={"sessionId": "nope"})
    assert r.status_code == 404
    r = client.post("/new-game", json={"variant": "expert"})
    assert r.status_code == 422


def test_pick_reports_and_clears_rejection():
    sid, _ = _new_game()
    r = client.post("/pick", json={"sessionId": sid, "color": "#123456"})
    assert r.json()["state"]["rejected"] == "unknown_color"
    r = client.post("/submit", json={"sessionId": sid})
    assert r.json()["state"]["rejected"] == "incomplete_guess"
    r = client.post("/pick", json={"sessionId": sid, "color": "#fd8083"})
    state = r.json()["state"]
    assert state["rejected"] is None
    assert state["currentGuess"] == [{"key": "#FD8083", "name": "Coral"}]
