def _cliente(client, nome="Ana Silva"):
    response = client.post("/cliente", json={"nome": nome})
    assert response.status_code == 201
    return response.json()


def test_delete_owned_documento(client):
    ana = _cliente(client)
    documento = client.post(f"/cliente/{ana['id']}/documentos", json={"tipo": "CPF", "numero": "123"}).json()

    response = client.delete(f"/documento/{documento['id']}")
    assert response.status_code == 204

    assert client.get(f"/documento/{documento['id']}").status_code == 404
    cliente = client.get(f"/cliente/{ana['id']}").json()
    assert documento["id"] not in [d["id"] for d in cliente["documentos"]]


def test_create_and_delete_unowned_documento(client):
    response = client.post("/documento", json={"tipo": "CNH", "numero": "777"})
    assert response.status_code == 201
    documento = response.json()
    assert client.get(f"/documento/{documento['id']}").json()["tipo"] == "CNH"

    assert client.delete(f"/documento/{documento['id']}").status_code == 204
    assert client.get(f"/documento/{documento['id']}").status_code == 404


def test_delete_missing_documento(client):
    ana = _cliente(client)
    client.post(f"/cliente/{ana['id']}/documentos", json={"tipo": "CPF", "numero": "123"})

    response = client.delete("/documento/999")
    assert response.status_code == 404
    assert len(client.get("/documento").json()) == 1


def test_deleted_documento_stays_gone(client):
    documento = client.post("/documento", json={"tipo": "CNH", "numero": "777"}).json()
    client.delete(f"/documento/{documento['id']}")

    assert client.delete(f"/documento/{documento['id']}").status_code == 404
    assert client.put(f"/documento/{documento['id']}", json={"tipo": "RG", "numero": "1"}).status_code == 404


def test_update_documento(client):
    documento = client.post("/documento", json={"tipo": "CNH", "numero": "777"}).json()

    response = client.put(f"/documento/{documento['id']}", json={"tipo": "RG", "numero": "778"})
    assert response.status_code == 204

    atualizado = client.get(f"/documento/{documento['id']}").json()
    assert atualizado == {"id": documento["id"], "tipo": "RG", "numero": "778"}


def test_duplicate_numero_is_a_conflict(client):
    assert client.post("/documento", json={"tipo": "CPF", "numero": "123"}).status_code == 201

    response = client.post("/documento", json={"tipo": "RG", "numero": "123"})
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "IntegrityError"


def test_blank_fields_are_rejected(client):
    assert client.post("/documento", json={"tipo": " ", "numero": "1"}).status_code == 400
    assert client.post("/documento", json={"tipo": "CPF"}).status_code == 400
