from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


def _client(**overrides) -> TestClient:
    return TestClient(create_app(Settings(**overrides)))


def test_evaluate_returns_value_display_and_steps():
    with _client() as client:
        resp = client.post("/evaluate", json={"text": "2+3*4"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["value"] == 14.0
    assert body["display"] == "14"
    assert body["is_finite"] is True
    assert body["steps"] == ["3 * 4 = 12", "2 + 12 = 14"]


def test_evaluate_non_finite_result_has_null_value():
    with _client() as client:
        resp = client.post("/evaluate", json={"text": "-10/0"})

    body = resp.json()
    assert resp.status_code == 200
    assert body["value"] is None
    assert body["display"] == "-inf"
    assert body["is_finite"] is False


def test_lex_error_maps_to_422():
    with _client() as client:
        resp = client.post("/evaluate", json={"text": "2+#3"})

    assert resp.status_code == 422
    assert resp.json()["error"] == "lex"


def test_parse_error_maps_to_422():
    with _client() as client:
        resp = client.post("/evaluate", json={"text": "(1+2"})

    assert resp.status_code == 422
    body = resp.json()
    assert body["error"] == "parse"
    assert body["detail"] == "expected kind PAREN but found kind EOF"


def test_strict_flag_overrides_settings():
    with _client(strict_trailing_input=True) as client:
        strict = client.post("/evaluate", json={"text": "2+3)"})
        loose = client.post("/evaluate", json={"text": "2+3)", "strict": False})

    assert strict.status_code == 422
    assert loose.json()["value"] == 5.0


def test_tokenize_lists_tokens_with_eof():
    with _client() as client:
        resp = client.post("/tokenize", json={"text": "2^3"})

    kinds = [t["kind"] for t in resp.json()["tokens"]]
    assert kinds == ["INTEGER", "POWER", "INTEGER", "EOF"]
    assert resp.json()["tokens"][0]["value"] == 2


def test_parse_returns_ast_and_display():
    with _client() as client:
        resp = client.post("/parse", json={"text": "2^3^2"})

    body = resp.json()
    assert body["display"] == "((2 ^ 3) ^ 2)"
    assert body["ast"]["node_type"] == "binop"
    assert body["ast"]["left"]["node_type"] == "binop"
    assert body["ast"]["right"] == {"node_type": "number", "value": 2}


def test_health():
    with _client(app_version="9.9.9") as client:
        resp = client.get("/health")

    assert resp.json() == {"status": "ok", "version": "9.9.9"}
