import os
from dotenv import load_dotenv

load_dotenv()

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./foodtoday.db")

# JWT
JWT_SECRET_KEY = (
    os.getenv("JWT_SECRET_KEY")
    or os.getenv("JWT_SECRET")
    or os.getenv("NEXTAUTH_SECRET")
    or "dev-secret-key-change-in-production"
)
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_DAYS = 7
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# CORS
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

# TheMealDB
THEMEALDB_BASE_URL = os.getenv("THEMEALDB_BASE_URL", "https://www.themealdb.com/api/json/v1/1")
EXTERNAL_TIMEOUT_SECONDS = int(os.getenv("EXTERNAL_TIMEOUT_SECONDS", "10"))
