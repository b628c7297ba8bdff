def create_user(client, name="Alice", email="alice@example.com"):
    return client.post("/api/users", json={"name": name, "email": email})


class TestUsersCRUD:
    def test_create_and_get_user(self, client):
        res = create_user(client)
        assert res.status_code == 201
        data = res.json()
        assert data == {"id": 1, "name": "Alice", "email": "alice@example.com"}
        assert res.headers["location"].endswith("/api/users/1")

        res = client.get(f"/api/users/{data['id']}")
        assert res.status_code == 200
        assert res.json() == data

    def test_get_missing_user(self, client):
        res = client.get("/api/users/77")
        assert res.status_code == 404
        assert res.json()["detail"] == "User with ID 77 not found"

    def test_get_by_email(self, client):
        created = create_user(client).json()
        res = client.get("/api/users/email/ALICE@example.com")
        assert res.status_code == 200
        assert res.json() == created

        res_404 = client.get("/api/users/email/nobody@example.com")
        assert res_404.status_code == 404
        assert res_404.json()["detail"] == "User with email nobody@example.com not found"

    def test_duplicate_email_is_409(self, client):
        assert create_user(client).status_code == 201
        res = create_user(client, name="Other", email="Alice@Example.com")
        assert res.status_code == 409
        body = res.json()
        assert body["error"] == "ConflictError"
        assert "already exists" in body["detail"]
        assert len(client.get("/api/users").json()) == 1

    def test_update_user(self, client):
        uid = create_user(client).json()["id"]
        res = client.put(f"/api/users/{uid}", json={"name": "Alice B", "email": "alice.b@example.com"})
        assert res.status_code == 200
        assert res.json() == {"id": uid, "name": "Alice B", "email": "alice.b@example.com"}

        res_nf = client.put("/api/users/999", json={"name": "x", "email": "x@example.com"})
        assert res_nf.status_code == 404
        assert res_nf.json()["detail"] == "User with ID 999 not found"

    def test_update_to_taken_email_is_409_and_leaves_user_unchanged(self, client):
        ann = create_user(client, name="Ann", email="ann@x.com").json()
        create_user(client, name="Max", email="max@x.com")
        res = client.put(f"/api/users/{ann['id']}", json={"name": "Ann", "email": "max@x.com"})
        assert res.status_code == 409
        assert client.get(f"/api/users/{ann['id']}").json() == ann

    def test_delete_user(self, client):
        uid = create_user(client).json()["id"]
        res = client.delete(f"/api/users/{uid}")
        assert res.status_code == 204
        assert res.text == ""
        assert client.get(f"/api/users/{uid}").status_code == 404
        assert client.delete(f"/api/users/{uid}").status_code == 404

    def test_delete_user_keeps_todos(self, client):
        uid = create_user(client).json()["id"]
        todo = client.post(
            "/api/todos", json={"order": 1, "createdByUserId": uid, "description": "task"}
        ).json()
        assert client.delete(f"/api/users/{uid}").status_code == 204
        res = client.get(f"/api/todos/{todo['id']}")
        assert res.status_code == 200
        assert res.json()["createdByUserId"] == uid


class TestUserQueries:
    def test_list_sorted_by_name(self, client):
        create_user(client, name="Carol", email="c@example.com")
        create_user(client, name="Alice", email="a@example.com")
        create_user(client, name="Bob", email="b@example.com")
        res = client.get("/api/users")
        assert res.status_code == 200
        assert [u["name"] for u in res.json()] == ["Alice", "Bob", "Carol"]

    def test_search(self, seeded_client):
        res = seeded_client.get("/api/users/search", params={"searchTerm": "john"})
        assert res.status_code == 200
        assert [u["name"] for u in res.json()] == ["Bob Johnson", "John Doe"]

    def test_search_without_term_returns_everyone(self, seeded_client):
        res = seeded_client.get("/api/users/search")
        assert res.status_code == 200
        assert len(res.json()) == 3


class TestUserValidation:
    def test_missing_email(self, client):
        res = client.post("/api/users", json={"name": "Alice"})
        assert res.status_code == 400
        body = res.json()
        assert body["error"] == "ValidationError"
        assert body["message"] == "Request validation failed"

    def test_blank_name(self, client):
        res = client.post("/api/users", json={"name": "  ", "email": "a@example.com"})
        assert res.status_code == 400


class TestNotFoundBody:
    def test_every_missing_user_response_has_the_same_shape(self, client):
        expected = {"error": "NotFoundError", "detail": "User with ID 31337 not found"}
        responses = [
            client.get("/api/users/31337"),
            client.put("/api/users/31337", json={"name": "x", "email": "x@example.com"}),
            client.delete("/api/users/31337"),
        ]
        for res in responses:
            assert res.status_code == 404
            assert res.json() == expected

        res = client.get("/api/users/email/ghost@example.com")
        assert res.json() == {"error": "NotFoundError", "detail": "User with email ghost@example.com not found"}
