ANA = {
    "nome": "Ana Silva",
    "nomeSocial": "Ana",
    "dataNascimento": "1990-04-12",
    "documentos": [{"tipo": "CPF", "numero": "123"}],
    "endereco": {
        "estado": "SP",
        "cidade": "São José dos Campos",
        "bairro": "Centro",
        "rua": "Av. Brasil",
        "numero": "100",
        "codigoPostal": "12200-000",
        "informacoesAdicionais": "Sala 2",
    },
    "telefones": [{"ddd": "12", "numero": "987654321"}],
}


def _create(client, payload=None):
    response = client.post("/cliente", json=payload or ANA)
    assert response.status_code == 201
    return response.json()


def test_create_cliente_with_owned_entities(client):
    cliente = _create(client)

    assert cliente["id"] > 0
    assert cliente["nome"] == "Ana Silva"
    assert cliente["nomeSocial"] == "Ana"
    assert cliente["dataNascimento"] == "1990-04-12"
    assert cliente["dataCadastro"] is not None
    assert cliente["documentos"][0]["numero"] == "123"
    assert cliente["endereco"]["codigoPostal"] == "12200-000"
    assert cliente["telefones"][0]["ddd"] == "12"


def test_create_minimal_cliente(client):
    cliente = _create(client, {"nome": "Bruno Lima"})
    assert cliente["documentos"] == []
    assert cliente["endereco"] is None
    assert cliente["telefones"] == []


def test_get_and_list_clientes(client):
    ana = _create(client)
    bruno = _create(client, {"nome": "Bruno Lima"})

    response = client.get(f"/cliente/{ana['id']}")
    assert response.status_code == 200
    assert response.json()["nome"] == "Ana Silva"

    response = client.get("/cliente")
    assert [c["id"] for c in response.json()] == [ana["id"], bruno["id"]]


def test_get_missing_cliente(client):
    response = client.get("/cliente/999")
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "EntityNotFoundException"
    assert error["path"] == "/cliente/999"


def test_update_replaces_mutable_fields_and_keeps_data_cadastro(client):
    ana = _create(client)

    response = client.put(f"/cliente/{ana['id']}", json={"nome": "Ana S.", "nomeSocial": ""})
    assert response.status_code == 204

    cliente = client.get(f"/cliente/{ana['id']}").json()
    assert cliente["nome"] == "Ana S."
    assert cliente["nomeSocial"] == ""
    assert cliente["dataNascimento"] is None
    assert cliente["dataCadastro"] == ana["dataCadastro"]


def test_update_ignores_nested_collections_and_client_data_cadastro(client):
    ana = _create(client)

    response = client.put(
        f"/cliente/{ana['id']}",
        json={"nome": "Ana Silva", "documentos": [], "endereco": None, "dataCadastro": "2001-01-01T00:00:00"},
    )
    assert response.status_code == 204

    cliente = client.get(f"/cliente/{ana['id']}").json()
    assert len(cliente["documentos"]) == 1
    assert cliente["endereco"] is not None
    assert cliente["dataCadastro"] == ana["dataCadastro"]


def test_update_missing_cliente(client):
    response = client.put("/cliente/42", json={"nome": "Ninguém"})
    assert response.status_code == 404


def test_invalid_payloads_are_rejected(client):
    response = client.post("/cliente", json={"nome": "An"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "ValidationError"

    response = client.post("/cliente", json={"nome": "   "})
    assert response.status_code == 400

    response = client.post("/cliente", json={"nome": "Ana Silva", "dataNascimento": "2999-01-01"})
    assert response.status_code == 400

    assert client.get("/cliente").json() == []


def test_delete_cliente_cascades(client):
    ana = _create(client)

    response = client.delete(f"/cliente/{ana['id']}")
    assert response.status_code == 204

    assert client.get(f"/cliente/{ana['id']}").status_code == 404
    assert client.get(f"/documento/{ana['documentos'][0]['id']}").status_code == 404
    assert client.get(f"/endereco/{ana['endereco']['id']}").status_code == 404
    assert client.get(f"/telefone/{ana['telefones'][0]['id']}").status_code == 404


def test_delete_missing_cliente(client):
    assert client.delete("/cliente/1").status_code == 404


def test_attach_documento_and_telefone(client):
    bruno = _create(client, {"nome": "Bruno Lima"})

    response = client.post(f"/cliente/{bruno['id']}/documentos", json={"tipo": "RG", "numero": "55"})
    assert response.status_code == 201
    documento = response.json()

    response = client.post(f"/cliente/{bruno['id']}/telefones", json={"ddd": "11", "numero": "12345678"})
    assert response.status_code == 201
    telefone = response.json()

    cliente = client.get(f"/cliente/{bruno['id']}").json()
    assert [d["id"] for d in cliente["documentos"]] == [documento["id"]]
    assert [t["id"] for t in cliente["telefones"]] == [telefone["id"]]


def test_attach_to_missing_cliente(client):
    response = client.post("/cliente/9/documentos", json={"tipo": "RG", "numero": "55"})
    assert response.status_code == 404
    assert client.get("/documento").json() == []


def test_replace_endereco(client):
    ana = _create(client)

    response = client.put(
        f"/cliente/{ana['id']}/endereco",
        json={"cidade": "Santos", "rua": "Rua do Porto", "numero": "7"},
    )
    assert response.status_code == 200
    assert response.json()["cidade"] == "Santos"

    enderecos = client.get("/endereco").json()
    assert [e["cidade"] for e in enderecos] == ["Santos"]
    assert client.get(f"/cliente/{ana['id']}").json()["endereco"]["cidade"] == "Santos"


def test_data_cadastro_is_stamped_by_the_server(client):
    response = client.post("/cliente", json={"nome": "Carla Dias", "dataCadastro": "2001-01-01T00:00:00"})
    assert response.status_code == 201

    data_cadastro = response.json()["dataCadastro"]
    assert data_cadastro is not None
    assert not data_cadastro.startswith("2001-01-01")
