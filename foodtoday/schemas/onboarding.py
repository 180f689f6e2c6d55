from pydantic import BaseModel
from typing import Optional, Dict, List
from foodtoday.schemas.user import UserResponse


class QuizOptionResponse(BaseModel):
    id: str
    text: str
    value: str
    category: str
    image: Optional[str] = None


class QuizQuestionResponse(BaseModel):
    id: str
    question: str
    options: List[QuizOptionResponse]


class QuizCompleteRequest(BaseModel):
    answers: Dict[str, List[str]] = {}


class QuizCompleteResponse(BaseModel):
    message: str
    preferences: Dict[str, List[str]]
    user: UserResponse
