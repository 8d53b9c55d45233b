from fastapi.testclient import TestClient

from fructosahel.main import app

client = TestClient(app)

FARM_ID = "7f1f2a7e-2f43-4c6a-9a55-6f4f7f1d9b10"


def test_healthcheck() -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_field_create_validation_returns_coerced_payload() -> None:
    response = client.post(
        "/api/v1/fields/validate",
        json={"farmId": FARM_ID, "name": "North plot", "sizeHectares": "2.5"},
    )
    assert response.status_code == 200
    assert response.json() == {"data": {"farmId": FARM_ID, "name": "North plot", "sizeHectares": 2.5}}


def test_field_create_validation_reports_all_issues_in_french() -> None:
    response = client.post(
        "/api/v1/fields/validate",
        json={"farmId": FARM_ID, "sizeHectares": -5},
        headers={"Accept-Language": "fr-FR,fr;q=0.9,en;q=0.5"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Erreur de validation"
    assert body["locale"] == "fr"
    assert body["details"] == [
        {"path": "name", "message": "name est obligatoire", "code": "missing"},
        {"path": "sizeHectares", "message": "sizeHectares doit être supérieur à 0", "code": "greater_than"},
    ]


def test_update_validation_rejects_immutable_field() -> None:
    response = client.patch("/api/v1/users/validate", json={"email": "new@fructosahel.org"})
    assert response.status_code == 400
    assert response.json()["details"] == [
        {"path": "email", "message": "email cannot be changed after creation", "code": "immutable"}
    ]


def test_update_validation_accepts_empty_payload() -> None:
    response = client.patch("/api/v1/livestock/validate", json={})
    assert response.status_code == 200
    assert response.json() == {"data": {}}


def test_user_create_validation_applies_defaults() -> None:
    response = client.post("/api/v1/users/validate", json={"email": "awa@fructosahel.org", "name": "Awa"})
    assert response.status_code == 200
    assert response.json()["data"]["role"] == "viewer"
    assert response.json()["data"]["language"] == "en"


def test_malformed_json_is_a_validation_error() -> None:
    response = client.post(
        "/api/v1/farms/validate",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    details = response.json()["details"]
    assert [(item["path"], item["code"]) for item in details] == [("", "json_invalid")]
    assert details[0]["message"] == "Payload is not valid JSON"


def test_messages_follow_locale_cookie_and_fall_back() -> None:
    french = client.get("/api/v1/i18n/messages", headers={"Cookie": "NEXT_LOCALE=fr"})
    german = client.get("/api/v1/i18n/messages", headers={"Accept-Language": "de-DE"})

    assert french.json()["locale"] == "fr"
    assert french.json()["messages"]["auth.signIn"] == "Se connecter"
    assert german.json()["locale"] == "en"


def test_account_routes_endpoint() -> None:
    response = client.get("/api/v1/auth/routes")
    assert response.status_code == 200
    assert response.json()["afterSignIn"] == "/dashboard"
    assert response.json()["accountSettings"] == "/handler/account-settings"


def test_dashboard_without_session_redirects_to_sign_in() -> None:
    response = client.get("/fr/dashboard/fields", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/fr/handler/sign-in?after_auth_return_to=%2Ffr%2Fdashboard%2Ffields"


def test_dashboard_with_session_is_not_redirected() -> None:
    response = client.get(
        "/fr/dashboard/fields",
        headers={"Cookie": "stack-access-token=abc"},
        follow_redirects=False,
    )
    assert response.status_code == 404
