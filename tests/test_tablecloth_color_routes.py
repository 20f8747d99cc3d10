"""Tests for tablecloth color endpoints."""


def test_list_is_ordered_by_name(auth_client):
    auth_client.post("/tablecloth-colors", json={"name": "Vermelho", "hex_color": "#FF0000"})
    auth_client.post("/tablecloth-colors", json={"name": "Azul", "hex_color": "#0000FF"})

    data = auth_client.get("/tablecloth-colors").json()["data"]
    assert [c["name"] for c in data] == ["Azul", "Vermelho"]


def test_invalid_hex_is_rejected(auth_client):
    response = auth_client.post("/tablecloth-colors", json={"name": "Azul", "hex_color": "blue"})
    assert response.status_code == 422


def test_rename(auth_client):
    color_id = auth_client.post(
        "/tablecloth-colors", json={"name": "Azul", "hex_color": "#0000FF"}
    ).json()["data"]["id"]
    response = auth_client.put(f"/tablecloth-colors/{color_id}", json={"name": "Azul claro"})
    assert response.json()["data"]["name"] == "Azul claro"
    assert response.json()["data"]["hex_color"] == "#0000FF"


def test_delete_missing(auth_client):
    assert auth_client.delete("/tablecloth-colors/999").status_code == 404
