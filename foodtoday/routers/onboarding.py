import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from foodtoday.database import get_db
from foodtoday.dependencies import get_current_user
from foodtoday.models.user import User
from foodtoday.schemas.onboarding import (
    QuizQuestionResponse,
    QuizCompleteRequest,
    QuizCompleteResponse,
)
from foodtoday.schemas.user import UserResponse
from foodtoday.services.onboarding import UnknownQuestionError, run_quiz, serialize_questions
from foodtoday.services.preferences import apply_preferences

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/onboarding", tags=["onboarding"])


@router.get("/questions", response_model=List[QuizQuestionResponse])
async def get_questions():
    return serialize_questions()


@router.post("/complete", response_model=QuizCompleteResponse)
async def complete_quiz(
    payload: QuizCompleteRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Turn swipe-quiz answers into the user's stored preferences."""
    try:
        preferences = run_quiz(payload.answers)
    except UnknownQuestionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    apply_preferences(
        current_user,
        dietary_restrictions=preferences["dietaryRestrictions"],
        allergies=preferences["allergies"],
        cuisine_preferences=preferences["cuisinePreferences"],
        meal_types=preferences["mealTypes"],
        skill_level=current_user.skill_level,
    )
    db.commit()
    db.refresh(current_user)
    logger.info(f"[ONBOARDING] User {current_user.id} completed the quiz")

    return QuizCompleteResponse(
        message="Preferences saved",
        preferences=preferences,
        user=UserResponse.model_validate(current_user),
    )
