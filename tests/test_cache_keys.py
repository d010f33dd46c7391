"""Unit tests for app.domain.models.cache_keys."""

from app.domain.models.cache_keys import ALL_CLIENTS, AllClients, ClientByCnpj, keys_for_cnpj


def test_render():
    assert ALL_CLIENTS.render() == "CLIENTES:ALL"
    assert ClientByCnpj("12345678000199").render() == "CLIENTES:12345678000199"


def test_keys_are_value_objects():
    assert AllClients() == ALL_CLIENTS
    assert ClientByCnpj("1") == ClientByCnpj("1")
    assert hash(ClientByCnpj("1")) == hash(ClientByCnpj("1"))


def test_keys_for_cnpj():
    assert keys_for_cnpj("1") == (ALL_CLIENTS, ClientByCnpj("1"))


def test_client_named_all_is_distinct_from_listing():
    assert ClientByCnpj("ALL") != ALL_CLIENTS
