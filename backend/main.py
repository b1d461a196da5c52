import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import select

from core.config import CORS_ORIGINS, DEMO_MODE, LOG_FORMAT, LOG_LEVEL
from core.logging_config import configure_logging
from db.base import Base
from db.session import SessionLocal, engine
from models import User
from routers.appointments import router as appointments_router
from routers.dashboard import router as dashboard_router
from routers.exercise import router as exercise_router
from routers.goals import router as goals_router
from routers.health import router as health_router
from routers.meals import router as meals_router
from routers.medications import router as medications_router
from routers.reports import router as reports_router
from routers.users import router as users_router

configure_logging(LOG_LEVEL, LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title="Health Tracker API")


@app.on_event("startup")
def startup() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready, demo_mode=%s", DEMO_MODE)
    if not DEMO_MODE:
        return
    db = SessionLocal()
    try:
        if db.scalar(select(User.id).limit(1)) is None:
            from core.mock_data import seed_demo_data

            seed_demo_data(db)
    finally:
        db.close()

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in (
    users_router,
    health_router,
    medications_router,
    meals_router,
    appointments_router,
    goals_router,
    exercise_router,
    reports_router,
    dashboard_router,
):
    app.include_router(router, prefix="/api")


@app.get("/healthz")
def healthz():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
