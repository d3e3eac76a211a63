import pytest
from models.users import Users, UserRole
from api.auth.security import hash_password


@pytest.fixture
def operator_user(test_db):
    user = Users(username="op", email="op@example.com", hashed_password=hash_password("password123"))
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


def test_admin_lists_users(admin_client, operator_user):
    users = admin_client.get("/users/").json()
    assert [u["username"] for u in users] == ["op"]
    assert users[0]["role"] == "operator"
    assert "hashed_password" not in users[0]


def test_admin_promotes_user(admin_client, operator_user):
    response = admin_client.put(f"/users/{operator_user.id}", json={"role": "reviewer"})

    assert response.status_code == 200
    assert response.json()["role"] == "reviewer"


def test_non_admin_cannot_manage_users(operator_client, operator_user):
    assert operator_client.get("/users/").status_code == 403
    assert operator_client.put(f"/users/{operator_user.id}", json={"role": "admin"}).status_code == 403
    assert operator_client.delete(f"/users/{operator_user.id}").status_code == 403


def test_user_reads_only_themselves(operator_client, operator_user):
    # the role-header test user has id 1, which is operator_user
    assert operator_client.get(f"/users/{operator_user.id}").status_code == 200
    assert operator_client.get("/users/2").status_code == 403


def test_delete_user(admin_client, operator_user):
    assert admin_client.delete(f"/users/{operator_user.id}").status_code == 204
    assert admin_client.get(f"/users/{operator_user.id}").status_code == 404


@pytest.mark.parametrize("field", ["role", "email", "password"])
def test_update_with_null_field_is_rejected(admin_client, operator_user, field):
    response = admin_client.put(f"/users/{operator_user.id}", json={field: None})

    assert response.status_code == 422
    stored = admin_client.get(f"/users/{operator_user.id}").json()
    assert stored["role"] == "operator"
    assert stored["email"] == "op@example.com"


def test_update_to_taken_email_is_rejected(admin_client, operator_user, test_db):
    other = Users(username="rev", email="rev@example.com", hashed_password=hash_password("password123"),
                  role=UserRole.reviewer)
    test_db.add(other)
    test_db.commit()

    response = admin_client.put(f"/users/{operator_user.id}", json={"email": "rev@example.com"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"


def test_update_keeping_own_email(admin_client, operator_user):
    response = admin_client.put(f"/users/{operator_user.id}", json={"email": "op@example.com", "role": "admin"})

    assert response.status_code == 200
    assert response.json()["role"] == "admin"
