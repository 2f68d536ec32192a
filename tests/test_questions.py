from app.model.attempts import Attempt
from app.model.questions import Question

NEW_QUESTION = {
    "question": "Which planet is known as the Red Planet?",
    "option_a": "Venus",
    "option_b": "Mars",
    "option_c": "Jupiter",
    "option_d": "Saturn",
    "correct_answer": "B",
}


def test_list_questions_full_view(client, questions):
    res = client.get("/questions")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["count"] == 3
    assert [q["correct_answer"] for q in body["data"]] == ["C", "A", "C"]


def test_list_questions_hides_answers(client, questions):
    body = client.get("/questions", params={"hide_answers": "true"}).json()
    assert body["count"] == 3
    for q in body["data"]:
        assert "correct_answer" not in q
        assert set(q) == {"id", "question", "option_a", "option_b", "option_c", "option_d"}


def test_show_question(client, questions):
    res = client.get(f"/questions/{questions[0].id}")
    assert res.status_code == 200
    assert res.json()["data"]["option_c"] == "Paris"
    assert res.json()["data"]["correct_answer"] == "C"

    hidden = client.get(f"/questions/{questions[0].id}", params={"hide_answers": True}).json()["data"]
    assert "correct_answer" not in hidden


def test_show_missing_question(client):
    res = client.get("/questions/123")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Question not found"}


def test_random_question_hides_answer_by_default(client, questions):
    res = client.get("/questions/random")
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["id"] in {q.id for q in questions}
    assert "correct_answer" not in data

    shown = client.get("/questions/random", params={"hide_answers": "false"}).json()["data"]
    assert shown["correct_answer"] in {"A", "C"}


def test_random_question_when_empty(client):
    res = client.get("/questions/random")
    assert res.status_code == 404
    assert res.json()["message"] == "No questions available"


def test_create_question_requires_authentication(client):
    assert client.post("/questions", json=NEW_QUESTION).status_code == 401


def test_create_question_requires_admin(client, user_headers):
    res = client.post("/questions", json=NEW_QUESTION, headers=user_headers)
    assert res.status_code == 403
    assert res.json() == {"success": False, "message": "This user isn't an admin."}


def test_admin_creates_question(client, db, admin_headers):
    res = client.post("/questions", json=NEW_QUESTION, headers=admin_headers)
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Question created successfully"
    assert body["data"]["correct_answer"] == "B"
    assert db.query(Question).filter(Question.id == body["data"]["id"]).count() == 1


def test_create_question_validation(client, admin_headers):
    payload = dict(NEW_QUESTION, option_d="   ", correct_answer="Z")
    del payload["question"]
    res = client.post("/questions", json=payload, headers=admin_headers)
    assert res.status_code == 422
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"
    assert set(body["errors"]) == {"question", "option_d", "correct_answer"}


def test_update_question_is_partial(client, admin_headers, questions):
    res = client.put(f"/questions/{questions[1].id}", json={"correct_answer": "B"}, headers=admin_headers)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["correct_answer"] == "B"
    assert data["option_a"] == "H2O"
    assert res.json()["message"] == "Question updated successfully"


def test_update_question_rejects_null_and_blank(client, admin_headers, questions):
    res = client.put(
        f"/questions/{questions[1].id}",
        json={"question": None, "option_a": ""},
        headers=admin_headers,
    )
    assert res.status_code == 422
    assert set(res.json()["errors"]) == {"question", "option_a"}


def test_update_missing_question(client, admin_headers):
    res = client.put("/questions/999", json={"correct_answer": "A"}, headers=admin_headers)
    assert res.status_code == 404


def test_update_requires_admin(client, user_headers, questions):
    res = client.put(f"/questions/{questions[0].id}", json={"correct_answer": "A"}, headers=user_headers)
    assert res.status_code == 403


def test_delete_question_removes_its_attempts_but_keeps_points(client, db, user, user_headers, admin_headers, questions):
    question_id = questions[0].id
    client.post("/attempts", json={"question_id": question_id, "user_answer": "C"}, headers=user_headers)

    res = client.delete(f"/questions/{question_id}", headers=admin_headers)
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Question deleted successfully"}

    db.expire_all()
    assert db.query(Question).count() == 2
    assert db.query(Attempt).count() == 0
    db.refresh(user)
    assert user.points == 10

    assert client.delete(f"/questions/{question_id}", headers=admin_headers).status_code == 404
