def test_root_and_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"

    response = client.get("/health")
    assert response.json() == {"status": "healthy", "users": 0}


def test_get_missing_user_returns_404(client):
    response = client.get("/api/v1/users/get/1")
    assert response.status_code == 404
    assert response.json()["detail"] == "User '1' not found"


def test_create_then_get_user(client):
    response = client.post(
        "/api/v1/users/create",
        json={"id": "1", "username": "user1", "password": "password1"},
    )
    assert response.status_code == 201
    assert response.json() == {"id": "1", "username": "user1"}

    response = client.get("/api/v1/users/get/1")
    assert response.status_code == 200
    body = response.json()
    assert body == {"id": "1", "username": "user1"}
    assert "password" not in body


def test_duplicate_create_returns_first(client):
    client.post("/api/v1/users/create", json={"id": "1", "username": "first", "password": "a"})
    response = client.post("/api/v1/users/create", json={"id": "1", "username": "second", "password": "b"})
    assert response.status_code == 201

    assert client.get("/api/v1/users/get/1").json()["username"] == "first"
    assert client.get("/health").json()["users"] == 2


def test_create_rejects_missing_fields(client):
    response = client.post("/api/v1/users/create", json={"id": "1", "username": "user1"})
    assert response.status_code == 422


def test_api_writes_through_to_container(client, container):
    from user_registry.domain.repositories.user_repository import UserRepository

    client.post("/api/v1/users/create", json={"id": "9", "username": "nine", "password": "p"})
    assert container.get(UserRepository).get_by_id("9").password == "p"
