def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root(client):
    body = client.get("/").json()
    assert body["name"] == "chanboard"
    assert body["script"] == "/static/script.js"


def test_script_is_served(client):
    response = client.get("/static/script.js")
    assert response.status_code == 200
    assert "function reply_to(id)" in response.text
    assert "'.timestamp > time'" in response.text
