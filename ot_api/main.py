from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ot_api.api.routes import health
from ot_api.domains.overtime.router import router as overtime_router
from ot_api.monitoring import configure_error_monitoring
from ot_payroll.config import get_settings
from ot_payroll.logging import configure_logging, get_logger

settings = get_settings()
configure_logging(settings.log_level)
configure_error_monitoring(settings)
logger = get_logger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(overtime_router)


@app.on_event("startup")
def startup_event() -> None:
    logger.info("startup_complete", env=settings.env, attendance_path=str(settings.attendance_path))


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "Overtime API running", "environment": settings.env}
