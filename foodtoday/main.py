import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from foodtoday.config import CORS_ALLOW_ORIGINS
from foodtoday.database import init_db
from foodtoday.routers import (
    auth_router,
    recipes_router,
    users_router,
    shopping_list_router,
    onboarding_router,
    notifications_router,
    messages_router,
    admin_router,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("[STARTUP] Database tables ready")
    yield


app = FastAPI(title="FoodToday API", lifespan=lifespan)

app.include_router(auth_router)
app.include_router(recipes_router)
app.include_router(users_router)
app.include_router(shopping_list_router)
app.include_router(onboarding_router)
app.include_router(notifications_router)
app.include_router(messages_router)
app.include_router(admin_router)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials="*" not in CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"[REQUEST] {request.method} {request.url}")
    return await call_next(request)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"[ERROR] {request.method} {request.url.path} failed", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
