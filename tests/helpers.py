from fastapi.testclient import TestClient

TEST_PASSWORD = "correct-horse-battery"


def register_and_login(client: TestClient, email: str, password: str = TEST_PASSWORD) -> dict:
    """Create an account and return Authorization headers for it."""
    response = client.post(
        "/api/v1/auth/signup",
        json={"fullName": email.split("@")[0], "email": email, "password": password},
    )
    assert response.status_code == 201, response.text

    response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
