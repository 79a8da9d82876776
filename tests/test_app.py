import uuid


def test_root_links_every_collection(client):
    body = client.get("/").json()
    links = body["_links"]
    assert links["clientes"]["href"] == "/cliente"
    assert links["documentos"]["href"] == "/documento"
    assert links["enderecos"]["href"] == "/endereco"
    assert links["telefones"]["href"] == "/telefone"


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_request_id_is_echoed(client):
    request_id = uuid.uuid4().hex
    response = client.get("/health", headers={"X-Request-ID": request_id})
    assert response.headers["X-Request-ID"] == request_id


def test_request_id_is_generated(client):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_invalid_request_id_is_replaced(client):
    response = client.get("/health", headers={"X-Request-ID": "not-a-uuid"})
    assert response.headers["X-Request-ID"] != "not-a-uuid"


def test_error_responses_carry_request_id(client):
    request_id = uuid.uuid4().hex

    response = client.get("/cliente/999", headers={"X-Request-ID": request_id})
    assert response.status_code == 404
    assert response.headers["X-Request-ID"] == request_id

    response = client.post("/cliente", json={"nome": "An"}, headers={"X-Request-ID": request_id})
    assert response.status_code == 400
    assert response.headers["X-Request-ID"] == request_id
