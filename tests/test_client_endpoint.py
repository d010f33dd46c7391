"""HTTP tests for the client registry endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.adapters.configuration.config import settings
from app.adapters.inbound.api.deps import get_client_repository, get_db_session
from app.adapters.outbound.security.admin_auth import AdminAuthManager
from app.main import app

BASE = "/api/v1/clientes"
CNPJ = "12345678000199"


async def _no_db():
    yield None


@pytest.fixture
def client(repository, container):
    app.state.container = container
    app.dependency_overrides[get_client_repository] = lambda: repository
    app.dependency_overrides[get_db_session] = _no_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_register_and_get(client):
    response = client.post(BASE, json={"cnpj": CNPJ, "nome": "Acme"})

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["token"]

    response = client.get(f"{BASE}/{CNPJ}")
    assert response.status_code == 200
    assert response.json() == {"cnpj": CNPJ, "nome": "Acme"}


def test_register_missing_nome_is_400(client):
    response = client.post(BASE, json={"cnpj": CNPJ})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "INVALID_INPUT"
    assert "nome" in body["detail"]
    assert body["errors"] == {"missing_fields": ["nome"]}


def test_register_without_body_is_400(client):
    response = client.post(BASE)

    assert response.status_code == 400
    assert response.json()["errors"] == {"missing_fields": ["cnpj", "nome"]}


def test_register_duplicate_is_409(client):
    client.post(BASE, json={"cnpj": CNPJ, "nome": "Acme"})

    response = client.post(BASE, json={"cnpj": CNPJ, "nome": "Acme"})

    assert response.status_code == 409
    assert response.json()["code"] == "RESOURCE_ALREADY_EXISTS"


def test_list_reflects_registration_after_cached_read(client):
    assert client.get(BASE).json() == []

    client.post(BASE, json={"cnpj": CNPJ, "nome": "Acme"})

    assert client.get(BASE).json() == [{"cnpj": CNPJ, "nome": "Acme"}]


def test_get_unknown_is_404(client):
    response = client.get(f"{BASE}/00000000000000")

    assert response.status_code == 404
    assert response.json()["code"] == "RESOURCE_NOT_FOUND"


def test_delete_flow(client):
    client.post(BASE, json={"cnpj": CNPJ, "nome": "Acme"})
    client.get(f"{BASE}/{CNPJ}")

    response = client.delete(f"{BASE}/{CNPJ}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "cnpj": CNPJ}
    assert client.get(f"{BASE}/{CNPJ}").status_code == 404
    assert client.get(BASE).json() == []


def test_delete_unknown_is_404(client):
    response = client.delete(f"{BASE}/{CNPJ}")

    assert response.status_code == 404


def test_persistence_error_does_not_leak_internals(client, repository):
    repository.fail_on.add("list_ordered_by_nome")

    response = client.get(BASE)

    assert response.status_code == 500
    body = response.json()
    assert body["code"] == "DATABASE_OPERATION_ERROR"
    assert "ORA-" not in body["detail"]


def test_token_is_not_exposed_by_reads(client):
    token = client.post(BASE, json={"cnpj": CNPJ, "nome": "Acme"}).json()["token"]

    assert token not in client.get(BASE).text
    assert token not in client.get(f"{BASE}/{CNPJ}").text


def test_me_resolves_bearer_secret(client):
    token = client.post(BASE, json={"cnpj": CNPJ, "nome": "Acme"}).json()["token"]

    response = client.get(f"{BASE}/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == {"nome": "Acme"}


def test_me_rejects_unknown_secret(client):
    response = client.get(f"{BASE}/me", headers={"Authorization": "Bearer invalido"})

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_CREDENTIALS"


def test_me_without_credentials_is_401(client):
    assert client.get(f"{BASE}/me").status_code == 401


def test_admin_password_required_when_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", AdminAuthManager.gerar_hash("s3nha-forte"))

    assert client.get(BASE).status_code == 401
    assert client.get(BASE, headers={"X-Admin-Password": "errada"}).status_code == 401
    assert client.get(BASE, headers={"X-Admin-Password": "s3nha-forte"}).status_code == 200


def test_register_accepts_numeric_cnpj(client):
    response = client.post(BASE, json={"cnpj": 12345678000199, "nome": "Acme"})

    assert response.status_code == 201
    assert client.get(f"{BASE}/{CNPJ}").json() == {"cnpj": CNPJ, "nome": "Acme"}


def test_register_wrong_field_type_is_400(client, repository):
    response = client.post(BASE, json={"cnpj": CNPJ, "nome": ["Acme"]})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "INVALID_INPUT"
    assert body["errors"] == {"invalid_fields": ["nome"]}
    assert repository.rows == {}


def test_register_malformed_json_is_400(client):
    response = client.post(BASE, content="{nao e json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"


def test_request_id_is_generated_for_every_response(client):
    ok = client.get(BASE)
    not_found = client.get(f"{BASE}/00000000000000")

    assert ok.headers["X-Request-ID"]
    assert not_found.headers["X-Request-ID"]
    assert ok.headers["X-Request-ID"] != not_found.headers["X-Request-ID"]


def test_request_id_from_caller_is_echoed(client):
    response = client.get(BASE, headers={"X-Request-ID": "pedido-42"})

    assert response.headers["X-Request-ID"] == "pedido-42"


def test_unusable_request_id_is_replaced(client):
    response = client.get(BASE, headers={"X-Request-ID": "x" * 65})

    assert response.headers["X-Request-ID"] != "x" * 65
