import logging
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from foodtoday import config
from foodtoday.database import get_db, init_db
from foodtoday.seed import seed_database
from foodtoday.services.quality import recipe_quality_report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["admin"])


@router.post("/setup-database")
async def setup_database(db: Session = Depends(get_db)):
    """Create tables and seed the demo data."""
    logger.info("[SETUP] Starting database setup")
    try:
        init_db(bind=db.get_bind())
        result = seed_database(db)
    except Exception as e:
        db.rollback()
        logger.exception("[SETUP] Database setup failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Database setup failed", "error": str(e)},
        )

    logger.info(f"[SETUP] Database ready: {result}")
    return {
        "message": "Database setup completed successfully!",
        "timestamp": datetime.utcnow().isoformat(),
    }


@router.get("/debug/recipe-quality")
async def recipe_quality(debug: Optional[str] = None, db: Session = Depends(get_db)):
    if config.ENVIRONMENT == "production" and debug is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not available in production")
    return recipe_quality_report(db)
