from scoresnake.config import Settings
from scoresnake.server import create_app


class TestIndex:

    def test_metadata(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.get_json()
        assert data["apiversion"] == "1"
        assert data["color"] == "#FFA500"
        assert data["head"] == "safe"
        assert data["tail"] == "round-bum"

    def test_metadata_uses_settings(self):
        app = create_app(Settings(author="me", color="#000000"))
        data = app.test_client().get("/").get_json()
        assert data["author"] == "me"
        assert data["color"] == "#000000"


class TestLifecycle:

    def test_start_and_end_are_acknowledged(self, client, make_payload):
        assert client.post("/start", json=make_payload()).status_code == 200
        assert client.post("/end", json=make_payload()).status_code == 200

    def test_start_without_body(self, client):
        assert client.post("/start").status_code == 200


class TestMove:

    def test_returns_engine_move(self, client, make_payload):
        response = client.post("/move", json=make_payload(you=[(5, 5)], food=[(5, 7)]))
        assert response.status_code == 200
        assert response.get_json() == {"move": "up"}

    def test_shout_included_when_configured(self, make_payload):
        client = create_app(Settings(shout="hiss")).test_client()
        data = client.post("/move", json=make_payload()).get_json()
        assert data["shout"] == "hiss"
        assert data["move"] in {"up", "down", "left", "right"}

    def test_invalid_snapshot_is_bad_request(self, client, make_payload):
        payload = make_payload(food=[(3, 3)])
        payload["board"]["width"] = 0
        response = client.post("/move", json=payload)
        assert response.status_code == 400
        assert "dimensions" in response.get_json()["error"]

    def test_missing_field_is_bad_request(self, client):
        response = client.post("/move", json={"board": {"width": 11, "height": 11}})
        assert response.status_code == 400
        assert "you" in response.get_json()["error"]

    def test_non_json_body_is_bad_request(self, client):
        response = client.post("/move", data="not json", content_type="text/plain")
        assert response.status_code == 400
