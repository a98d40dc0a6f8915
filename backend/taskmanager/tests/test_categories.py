"""
Tests for category endpoints.
"""


def test_create_category(client, register):
    """Test category creation."""
    headers = register("alice")
    response = client.post("/api/categories", json={"name": "Work"}, headers=headers)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Category created successfully"
    assert body["category"]["name"] == "Work"
    assert body["category"]["id"]
    assert body["category"]["createdAt"]


def test_create_category_trims_name(client, register):
    """Test surrounding whitespace is removed from the name."""
    headers = register("alice")
    response = client.post("/api/categories", json={"name": "  Home  "}, headers=headers)
    assert response.status_code == 201
    assert response.json()["category"]["name"] == "Home"


def test_create_category_empty_name(client, register):
    """Test an empty or blank name is rejected."""
    headers = register("alice")
    for name in ("", "   "):
        response = client.post("/api/categories", json={"name": name}, headers=headers)
        assert response.status_code == 400
    assert client.get("/api/categories", headers=headers).json() == []


def test_create_category_missing_name(client, register):
    """Test a body without a name."""
    headers = register("alice")
    response = client.post("/api/categories", json={}, headers=headers)
    assert response.status_code == 400


def test_duplicate_category_same_owner(client, register, make_category):
    """Test the same name twice for one user."""
    headers = register("alice")
    make_category(headers, "Work")
    response = client.post("/api/categories", json={"name": "Work"}, headers=headers)
    assert response.status_code == 409
    assert len(client.get("/api/categories", headers=headers).json()) == 1


def test_duplicate_category_different_owner(client, register, make_category):
    """Test the same name for two users."""
    alice = register("alice")
    bob = register("bob")
    make_category(alice, "Work")
    response = client.post("/api/categories", json={"name": "Work"}, headers=bob)
    assert response.status_code == 201


def test_list_categories_oldest_first(client, register, make_category):
    """Test listing returns the caller's categories in creation order."""
    headers = register("alice")
    for name in ("Work", "Home", "Errands"):
        make_category(headers, name)

    response = client.get("/api/categories", headers=headers)
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Work", "Home", "Errands"]


def test_list_categories_is_owner_scoped(client, register, make_category):
    """Test that other users' categories are not listed."""
    alice = register("alice")
    bob = register("bob")
    make_category(alice, "Work")
    make_category(bob, "Garden")

    assert [c["name"] for c in client.get("/api/categories", headers=bob).json()] == ["Garden"]


def test_delete_category_cascades_to_tasks(client, register, make_category, make_task):
    """Test deleting a category removes its tasks and nothing else."""
    alice = register("alice")
    bob = register("bob")
    work = make_category(alice, "Work")
    home = make_category(alice, "Home")
    bob_work = make_category(bob, "Work")
    make_task(alice, work, "Ship spec")
    make_task(alice, work, "Review PR")
    make_task(alice, home, "Water plants")
    make_task(bob, bob_work, "Bob's task")

    response = client.delete(f"/api/categories/{work}", headers=alice)
    assert response.status_code == 200
    assert response.json()["deletedTasks"] == 2

    assert [c["name"] for c in client.get("/api/categories", headers=alice).json()] == ["Home"]
    assert [t["title"] for t in client.get("/api/tasks", headers=alice).json()] == ["Water plants"]
    assert [t["title"] for t in client.get("/api/tasks", headers=bob).json()] == ["Bob's task"]


def test_delete_category_not_owned(client, register, make_category):
    """Test another user's category looks like a missing one."""
    alice = register("alice")
    bob = register("bob")
    work = make_category(alice, "Work")

    response = client.delete(f"/api/categories/{work}", headers=bob)
    assert response.status_code == 404
    assert response.json()["message"] == "Category not found"
    assert len(client.get("/api/categories", headers=alice).json()) == 1


def test_delete_category_missing(client, register):
    """Test deleting an id that does not exist."""
    headers = register("alice")
    assert client.delete("/api/categories/12345", headers=headers).status_code == 404


def test_delete_category_bad_id(client, register):
    """Test a malformed id."""
    headers = register("alice")
    response = client.delete("/api/categories/not-an-id", headers=headers)
    assert response.status_code == 400
    assert "message" in response.json()


def test_name_free_again_after_delete(client, register, make_category):
    """Test a deleted category's name can be reused."""
    headers = register("alice")
    work = make_category(headers, "Work")
    client.delete(f"/api/categories/{work}", headers=headers)
    response = client.post("/api/categories", json={"name": "Work"}, headers=headers)
    assert response.status_code == 201
