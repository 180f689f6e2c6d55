import logging
from email_validator import EmailNotValidError, validate_email
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from foodtoday.database import get_db
from foodtoday.models.user import User
from foodtoday.schemas.user import (
    RegisterRequest,
    LoginRequest,
    PreferencesUpdateRequest,
    AuthResponse,
    UserResponse,
    UserUpdateResponse,
)
from foodtoday.services.auth import get_password_hash, verify_password, create_access_token
from foodtoday.services.preferences import apply_preferences
from foodtoday.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    """Register a new user with name, email and password."""
    if not user_data.name or not user_data.email or not user_data.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="All fields are required",
        )

    try:
        validate_email(user_data.email, check_deliverability=False)
    except EmailNotValidError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid email address",
        )

    existing_user = db.query(User).filter(User.email == user_data.email).first()
    if existing_user:
        logger.warning(f"[REGISTER] Email {user_data.email} already registered")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        )

    user = User(
        name=user_data.name,
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password),
    )
    apply_preferences(user)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"[REGISTER] User {user.email} created")

    return AuthResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user),
        token=create_access_token(user.id),
    )


@router.post("/login", response_model=AuthResponse)
async def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Login with email and password."""
    if not credentials.email or not credentials.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required",
        )

    user = db.query(User).filter(User.email == credentials.email).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email not found. Please create a new account.",
        )

    if not verify_password(credentials.password, user.hashed_password):
        logger.warning(f"[LOGIN] Invalid password for {credentials.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password. Please try again.",
        )

    logger.info(f"[LOGIN] User {user.email} authenticated")
    return AuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        token=create_access_token(user.id),
    )


@router.post("/preferences", response_model=UserUpdateResponse)
async def update_preferences(
    update_data: PreferencesUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Replace the current user's food preferences."""
    apply_preferences(
        current_user,
        dietary_restrictions=update_data.dietary_restrictions,
        allergies=update_data.allergies,
        cuisine_preferences=update_data.cuisine_preferences,
        meal_types=update_data.meal_types,
        skill_level=update_data.skill_level,
    )
    db.commit()
    db.refresh(current_user)

    return UserUpdateResponse(
        message="Preferences updated successfully",
        user=UserResponse.model_validate(current_user),
    )


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current authenticated user info."""
    return current_user
