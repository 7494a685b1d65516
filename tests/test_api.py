"""
Tests for the registry and the HTTP endpoints.
"""
import pytest
from fastapi.testclient import TestClient

from cipherlab.main import app
from cipherlab.models.schemas import CipherType
from cipherlab.services.engines.registry import EngineRegistry
from cipherlab.services.engines.route import RouteCipher
from cipherlab.services.engines.substitution import SubstitutionCipher


class TestEngineRegistry:
    """Test the cipher registry."""

    def test_all_ciphers_registered(self):
        registered = EngineRegistry.list_registered()

        assert CipherType.SUBSTITUTION in registered
        assert CipherType.ROUTE in registered

    def test_get_engine_class(self):
        registry = EngineRegistry()

        assert registry.get_engine_class(CipherType.SUBSTITUTION) is SubstitutionCipher
        assert registry.get_engine_class(CipherType.ROUTE) is RouteCipher

    def test_create_engine(self):
        registry = EngineRegistry()

        engine = registry.create_engine(CipherType.ROUTE, 4, "HEDGEHOG")

        assert isinstance(engine, RouteCipher)
        assert engine.encode("HEDGEHOG") == "GGDOEHHE"

    def test_engines_are_not_shared(self):
        """Each call builds a new engine with its own key."""
        registry = EngineRegistry()

        first = registry.create_engine(CipherType.SUBSTITUTION, "БОРЩ", "")
        second = registry.create_engine(CipherType.SUBSTITUTION, "Я", "")

        assert first is not second
        assert first.encode("СУП") == "ТВА"
        assert second.encode("КОД") == "ЙНГ"


class TestCipherEndpoints:
    """Test the v1 API."""

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_list_ciphers(self, client):
        response = client.get("/api/v1/ciphers")

        assert response.status_code == 200
        types = {item["cipher_type"] for item in response.json()}
        assert types == {"substitution", "route"}

    def test_encrypt_substitution(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "суп", "cipher_type": "substitution", "key": "БОРЩ"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["ciphertext"] == "ТВА"
        assert body["key_used"] == "БОРЩ"
        assert "БОРЩ" in body["explanation"]

    def test_decrypt_substitution(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": "ЙНГ", "cipher_type": "substitution", "key": "Я"},
        )

        assert response.status_code == 200
        assert response.json()["plaintext"] == "КОД"

    def test_encrypt_route(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "PRI VET", "cipher_type": "route", "key": 3},
        )

        assert response.status_code == 200
        assert response.json()["ciphertext"] == "ITREPV"

    def test_encrypt_route_string_key(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "HEDGEHOG", "cipher_type": "route", "key": "4"},
        )

        assert response.status_code == 200
        assert response.json()["ciphertext"] == "GGDOEHHE"

    def test_decrypt_route(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={
                "ciphertext": "GGDOEHHE",
                "cipher_type": "route",
                "key": 4,
                "open_text": "HEDGEHOG",
            },
        )

        assert response.status_code == 200
        assert response.json()["plaintext"] == "HEDGEHOG"

    def test_decrypt_route_without_open_text(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": "GGDOEHHE", "cipher_type": "route", "key": 4},
        )

        assert response.status_code == 400

    def test_weak_key_rejected(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "СУП", "cipher_type": "substitution", "key": "ЙЙЙ"},
        )

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert "Weak key" in detail["message"]
        assert detail["details"] == {"key": "ЙЙЙ"}

    def test_strict_decrypt_rejected(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": "суп", "cipher_type": "substitution", "key": "БОРЩ"},
        )

        assert response.status_code == 400

    def test_route_key_out_of_range(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "SHORT", "cipher_type": "route", "key": 10},
        )

        assert response.status_code == 400

    def test_empty_text_rejected_by_engine(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "", "cipher_type": "substitution", "key": "БОРЩ"},
        )

        assert response.status_code == 400

    def test_unknown_cipher_type(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "HELLO", "cipher_type": "enigma", "key": "A"},
        )

        assert response.status_code == 422

    def test_huge_route_key_rejected(self, client):
        """Keys too long for integer conversion are a client error."""
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "PRIVET", "cipher_type": "route", "key": "9" * 5000},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "Key out of range"

    def test_error_details_returned(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={
                "ciphertext": "ITREPV",
                "cipher_type": "route",
                "key": 3,
                "open_text": "SHORT",
            },
        )

        assert response.status_code == 400
        assert response.json()["detail"]["details"] == {
            "cipher_length": 6,
            "open_length": 5,
        }

    def test_open_text_length_limited(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={
                "ciphertext": "ITREPV",
                "cipher_type": "route",
                "key": 3,
                "open_text": "A" * 10_001,
            },
        )

        assert response.status_code == 400
        assert response.json()["detail"]["details"]["field"] == "open_text"

    def test_open_text_schema_limit(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={
                "ciphertext": "ITREPV",
                "cipher_type": "route",
                "key": 3,
                "open_text": "A" * 100_001,
            },
        )

        assert response.status_code == 422
