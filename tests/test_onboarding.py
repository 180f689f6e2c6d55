import pytest
from foodtoday.services.onboarding import (
    QUESTIONS,
    SwipeQuiz,
    UnknownQuestionError,
    aggregate_answers,
    run_quiz,
)


def test_quiz_walks_forward_and_back():
    quiz = SwipeQuiz()
    assert quiz.current_question.id == "dietary"
    assert quiz.progress == 25

    quiz.prev()
    assert quiz.current_step == 0

    quiz.next()
    quiz.next()
    assert quiz.current_question.id == "cuisine"
    quiz.prev()
    assert quiz.current_question.id == "allergies"


def test_next_on_last_question_completes():
    quiz = SwipeQuiz()
    quiz.answer("dietary", ["vegetarian"])
    quiz.answer("meals", ["dinner", "snacks"])
    for _ in range(quiz.total_questions - 1):
        assert quiz.next() is None
    assert quiz.progress == 100
    assert not quiz.is_complete

    preferences = quiz.next()
    assert quiz.is_complete
    assert preferences == {
        "dietaryRestrictions": ["vegetarian"],
        "allergies": [],
        "cuisinePreferences": [],
        "mealTypes": ["dinner", "snacks"],
    }


def test_aggregate_keeps_question_order_and_ignores_unknown_options():
    answers = {"cuisine": ["asian", "italian", "klingon"], "allergies": ["soy"]}
    preferences = aggregate_answers(QUESTIONS, answers)
    assert preferences["cuisinePreferences"] == ["italian", "asian"]
    assert preferences["allergies"] == ["soy"]


def test_unknown_question_is_rejected():
    quiz = SwipeQuiz()
    with pytest.raises(UnknownQuestionError):
        quiz.answer("favourite-colour", ["blue"])


def test_run_quiz_replays_answers():
    assert run_quiz({"dietary": ["vegan"]})["dietaryRestrictions"] == ["vegan"]


def test_questions_endpoint(client):
    resp = client.get("/api/onboarding/questions")
    assert resp.status_code == 200
    questions = resp.json()
    assert [q["id"] for q in questions] == ["dietary", "allergies", "cuisine", "meals"]
    assert all(len(q["options"]) == 4 for q in questions)
    assert questions[1]["options"][0]["category"] == "allergies"


def test_complete_saves_preferences(client, auth_headers):
    client.post("/api/auth/preferences", headers=auth_headers, json={"skillLevel": "advanced"})

    resp = client.post(
        "/api/onboarding/complete",
        headers=auth_headers,
        json={"answers": {"dietary": ["vegetarian"], "cuisine": ["mexican"]}},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["preferences"]["dietaryRestrictions"] == ["vegetarian"]
    assert data["user"]["cuisinePreferences"] == ["mexican"]
    assert data["user"]["skillLevel"] == "advanced"

    me = client.get("/api/auth/me", headers=auth_headers).json()
    assert me["dietaryRestrictions"] == ["vegetarian"]


def test_complete_rejects_unknown_question(client, auth_headers):
    resp = client.post(
        "/api/onboarding/complete",
        headers=auth_headers,
        json={"answers": {"spice": ["hot"]}},
    )
    assert resp.status_code == 400


def test_complete_requires_auth(client):
    resp = client.post("/api/onboarding/complete", json={"answers": {}})
    assert resp.status_code == 401
