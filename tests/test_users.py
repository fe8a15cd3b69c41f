from sqlmodel import Session, select

from app.models.cart import Cart
from app.models.user import User
from tests.conftest import auth_headers, make_user


class TestCreateUser:
    def test_create_user_returns_user_with_cart(self, client, session: Session):
        response = client.post("/api/user/create", json={
            "username": "bob",
            "password": "password123",
            "confirmPassword": "password123",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "bob"
        assert data["id"] is not None
        assert data["cart_id"] is not None
        assert "password" not in data
        assert "password_hash" not in data

        user = session.exec(select(User).where(User.username == "bob")).one()
        assert user.password_hash != "password123"
        cart = session.exec(select(Cart).where(Cart.user_id == user.id)).one()
        assert cart.id == data["cart_id"]

    def test_short_password_is_rejected_before_persisting(self, client, session: Session):
        response = client.post("/api/user/create", json={
            "username": "bob",
            "password": "short",
            "confirmPassword": "short",
        })

        assert response.status_code == 400
        assert session.exec(select(User)).all() == []
        assert session.exec(select(Cart)).all() == []

    def test_six_character_password_is_too_short(self, client):
        response = client.post("/api/user/create", json={
            "username": "bob",
            "password": "abcdef",
            "confirmPassword": "abcdef",
        })
        assert response.status_code == 400

    def test_seven_character_password_is_enough(self, client):
        response = client.post("/api/user/create", json={
            "username": "bob",
            "password": "abcdefg",
            "confirmPassword": "abcdefg",
        })
        assert response.status_code == 200

    def test_mismatched_confirmation_is_rejected(self, client, session: Session):
        response = client.post("/api/user/create", json={
            "username": "bob",
            "password": "password123",
            "confirmPassword": "password321",
        })

        assert response.status_code == 400
        assert session.exec(select(User)).all() == []
        assert session.exec(select(Cart)).all() == []

    def test_duplicate_username_is_rejected(self, client, bob):
        response = client.post("/api/user/create", json={
            "username": "bob",
            "password": "password123",
            "confirmPassword": "password123",
        })
        assert response.status_code == 400


class TestFindUser:
    def test_find_by_username_happy_path(self, client, bob):
        response = client.get("/api/user/bob", headers=auth_headers("bob"))

        assert response.status_code == 200
        assert response.json()["username"] == "bob"
        assert response.json()["id"] == bob.id

    def test_find_by_username_of_someone_else_is_forbidden(self, client, session: Session, bob):
        make_user(session, "alice")
        response = client.get("/api/user/alice", headers=auth_headers("bob"))
        assert response.status_code == 403

    def test_find_by_username_forbidden_even_if_target_missing(self, client, bob):
        response = client.get("/api/user/nobody", headers=auth_headers("bob"))
        assert response.status_code == 403

    def test_find_by_username_not_found(self, client):
        response = client.get("/api/user/ghost", headers=auth_headers("ghost"))
        assert response.status_code == 404

    def test_find_by_username_without_token_is_forbidden(self, client, bob):
        response = client.get("/api/user/bob")
        assert response.status_code == 403

    def test_find_by_username_with_garbage_token_is_forbidden(self, client, bob):
        response = client.get("/api/user/bob", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 403

    def test_find_by_id_happy_path(self, client, bob):
        response = client.get(f"/api/user/id/{bob.id}", headers=auth_headers("bob"))

        assert response.status_code == 200
        assert response.json()["username"] == "bob"
        assert response.json()["id"] == bob.id
        assert response.json()["cart_id"] is not None

    def test_find_by_id_of_someone_else_is_forbidden(self, client, session: Session, bob):
        alice = make_user(session, "alice")
        response = client.get(f"/api/user/id/{alice.id}", headers=auth_headers("bob"))
        assert response.status_code == 403

    def test_find_by_id_with_unknown_token_subject_is_forbidden(self, client, bob):
        response = client.get(f"/api/user/id/{bob.id}", headers=auth_headers("ghost"))
        assert response.status_code == 403


class TestLogin:
    def test_login_returns_bearer_token(self, client):
        client.post("/api/user/create", json={
            "username": "bob",
            "password": "password123",
            "confirmPassword": "password123",
        })

        response = client.post("/login", json={"username": "bob", "password": "password123"})

        assert response.status_code == 200
        token = response.json()["access_token"]
        assert response.json()["token_type"] == "bearer"
        assert response.headers["Authorization"] == f"Bearer {token}"

        profile = client.get("/api/user/bob", headers={"Authorization": f"Bearer {token}"})
        assert profile.status_code == 200

    def test_login_with_wrong_password_is_unauthorized(self, client, bob):
        response = client.post("/login", json={"username": "bob", "password": "wrong-password"})
        assert response.status_code == 401

    def test_login_with_unknown_user_is_unauthorized(self, client):
        response = client.post("/login", json={"username": "ghost", "password": "password123"})
        assert response.status_code == 401


def test_registration_stamps_timezone_aware_creation_time(client, session: Session):
    response = client.post("/api/user/create", json={
        "username": "bob",
        "password": "password123",
        "confirmPassword": "password123",
    })

    assert response.status_code == 200
    assert User(username="x", password_hash="y").created_at.tzinfo is not None
