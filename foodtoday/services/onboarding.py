"""Swipe-quiz onboarding: question catalogue and answer aggregation."""

from dataclasses import dataclass, field
from typing import Optional

PREFERENCE_CATEGORIES = [
    "dietaryRestrictions",
    "allergies",
    "cuisinePreferences",
    "mealTypes",
]


@dataclass(frozen=True)
class QuizOption:
    id: str
    text: str
    value: str
    category: str
    image: Optional[str] = None


@dataclass(frozen=True)
class QuizQuestion:
    id: str
    question: str
    options: tuple

    def option(self, option_id: str) -> Optional[QuizOption]:
        return next((o for o in self.options if o.id == option_id), None)


def _options(category: str, *pairs) -> tuple:
    return tuple(QuizOption(id=value, text=text, value=value, category=category) for value, text in pairs)


QUESTIONS = (
    QuizQuestion(
        id="dietary",
        question="Do you have any dietary restrictions?",
        options=_options(
            "dietaryRestrictions",
            ("vegetarian", "Vegetarian"),
            ("vegan", "Vegan"),
            ("gluten-free", "Gluten Free"),
            ("dairy-free", "Dairy Free"),
        ),
    ),
    QuizQuestion(
        id="allergies",
        question="Do you have any food allergies?",
        options=_options(
            "allergies",
            ("nuts", "Nuts"),
            ("shellfish", "Shellfish"),
            ("eggs", "Eggs"),
            ("soy", "Soy"),
        ),
    ),
    QuizQuestion(
        id="cuisine",
        question="What cuisines do you prefer?",
        options=_options(
            "cuisinePreferences",
            ("italian", "Italian"),
            ("mexican", "Mexican"),
            ("asian", "Asian"),
            ("mediterranean", "Mediterranean"),
        ),
    ),
    QuizQuestion(
        id="meals",
        question="What types of meals are you looking for?",
        options=_options(
            "mealTypes",
            ("breakfast", "Breakfast"),
            ("lunch", "Lunch"),
            ("dinner", "Dinner"),
            ("snacks", "Snacks"),
        ),
    ),
)


class UnknownQuestionError(ValueError):
    pass


def aggregate_answers(questions, answers: dict) -> dict:
    """Group selected option values by preference category, in question order.

    Option ids that a question does not offer are ignored.
    """
    preferences = {category: [] for category in PREFERENCE_CATEGORIES}
    for question in questions:
        selected = answers.get(question.id) or []
        for option in question.options:
            if option.id in selected:
                preferences.setdefault(option.category, []).append(option.value)
    return preferences


@dataclass
class SwipeQuiz:
    """Linear walk through the questions, accumulating answers."""

    questions: tuple = QUESTIONS
    current_step: int = 0
    answers: dict = field(default_factory=dict)
    is_complete: bool = False
    preferences: Optional[dict] = None

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> QuizQuestion:
        return self.questions[self.current_step]

    @property
    def progress(self) -> int:
        """Percentage shown by the progress bar."""
        return round((self.current_step + 1) / self.total_questions * 100)

    def answer(self, question_id: str, option_ids: list[str]) -> None:
        if not any(q.id == question_id for q in self.questions):
            raise UnknownQuestionError(f"Unknown question: {question_id}")
        self.answers[question_id] = list(option_ids)

    def next(self) -> Optional[dict]:
        """Advance one question; on the last one, complete the quiz."""
        if self.current_step < self.total_questions - 1:
            self.current_step += 1
            return None
        return self.complete()

    def prev(self) -> None:
        if self.current_step > 0:
            self.current_step -= 1

    def complete(self) -> dict:
        self.preferences = aggregate_answers(self.questions, self.answers)
        self.is_complete = True
        return self.preferences


def run_quiz(answers: dict) -> dict:
    """Replay submitted answers through a quiz and return the preferences."""
    quiz = SwipeQuiz()
    for question_id, option_ids in answers.items():
        quiz.answer(question_id, option_ids)
    preferences = None
    while preferences is None:
        preferences = quiz.next()
    return preferences


def serialize_questions(questions=QUESTIONS) -> list[dict]:
    return [
        {
            "id": q.id,
            "question": q.question,
            "options": [
                {
                    "id": o.id,
                    "text": o.text,
                    "value": o.value,
                    "category": o.category,
                    "image": o.image,
                }
                for o in q.options
            ],
        }
        for q in questions
    ]
