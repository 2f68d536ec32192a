from app.model.users import User


def test_register_login_and_profile(client, db):
    res = client.post("/register", json={"name": "Carol", "email": "Carol@Example.com", "password": "s3cret-pass"})
    assert res.status_code == 201
    assert res.json()["token_type"] == "bearer"

    login = client.post("/login", json={"email": "carol@example.com", "password": "s3cret-pass"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    profile = client.get("/user", headers={"Authorization": f"Bearer {token}"})
    assert profile.status_code == 200
    assert profile.json()["name"] == "Carol"
    assert profile.json()["email"] == "carol@example.com"
    assert profile.json()["points"] == 0
    assert profile.json()["is_admin"] is False


def test_register_duplicate_email(client, db):
    payload = {"name": "Dave", "email": "dave@example.com", "password": "password123"}
    assert client.post("/register", json=payload).status_code == 201
    res = client.post("/register", json=payload)
    assert res.status_code == 422
    assert res.json()["errors"] == {"email": ["The email has already been taken."]}
    assert db.query(User).filter(User.email == "dave@example.com").count() == 1


def test_register_validation(client):
    res = client.post("/register", json={"name": "", "email": "not-an-email", "password": "short"})
    assert res.status_code == 422
    assert set(res.json()["errors"]) == {"name", "email", "password"}


def test_login_with_wrong_password(client):
    client.post("/register", json={"name": "Erin", "email": "erin@example.com", "password": "password123"})
    res = client.post("/login", json={"email": "erin@example.com", "password": "wrong-password"})
    assert res.status_code == 401
    assert res.json() == {"success": False, "message": "Invalid credentials."}


def test_profile_requires_token(client):
    res = client.get("/user")
    assert res.status_code == 401
    assert res.json()["success"] is False


def test_leaderboard_is_public_sorted_and_capped(client, make_user):
    for points in [30, 10, 50, 20, 40] * 5:
        make_user(points=points)

    res = client.get("/leaderboard")
    assert res.status_code == 200
    data = res.json()["data"]
    assert len(data) == 20
    assert [row["points"] for row in data] == sorted((row["points"] for row in data), reverse=True)
    assert set(data[0]) == {"id", "name", "points"}


def test_leaderboard_breaks_ties_by_user_id(client, make_user):
    first = make_user(points=10)
    second = make_user(points=10)
    leader = make_user(points=20)

    data = client.get("/leaderboard").json()["data"]
    assert [row["id"] for row in data] == [leader.id, first.id, second.id]


def test_leaderboard_reflects_scoring(client, make_user, headers_for, questions):
    alice = make_user(name="Alice")
    bob = make_user(name="Bob")
    client.post("/attempts", json={"question_id": questions[0].id, "user_answer": "C"}, headers=headers_for(bob))

    data = client.get("/leaderboard").json()["data"]
    assert data[0] == {"id": bob.id, "name": "Bob", "points": 10}
    assert data[1] == {"id": alice.id, "name": "Alice", "points": 0}


def test_root(client):
    assert client.get("/").status_code == 200
