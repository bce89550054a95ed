import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from .application.ports.clock import Clock
from .application.services.hospital_manager import HospitalManager
from .config import Settings, get_settings, settings
from .exceptions import ClinicError, clinic_exception_handler, create_success_response, http_exception_handler
from .infrastructure.audit.std_logger import StdAuditLogger
from .infrastructure.clock.system_clock import SystemClock
from .middleware import LoggingMiddleware, SecurityMiddleware
from .routers import appointments_router, doctors_router, patients_router
from .schemas import HealthResponse
from .seed import seed_demo_data

logger = logging.getLogger(__name__)


def build_manager(settings: Settings) -> HospitalManager:
    return HospitalManager(
        audit_logger=StdAuditLogger(),
        opening_time=settings.OPENING_TIME,
        closing_time=settings.CLOSING_TIME,
        cascade_on_remove=settings.CASCADE_ON_REMOVE,
    )


def create_app(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> FastAPI:
    settings = settings or get_settings()
    clock = clock or SystemClock()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=settings.LOG_FORMAT
    )

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, debug=settings.DEBUG)
    app.state.settings = settings
    app.state.clock = clock
    app.state.manager = build_manager(settings)

    if settings.SEED_DEMO_DATA:
        seed_demo_data(app.state.manager, clock)

    app.add_middleware(SecurityMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ClinicError, clinic_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)

    app.include_router(doctors_router.router)
    app.include_router(patients_router.router)
    app.include_router(appointments_router.router)

    @app.get("/health")
    def health(request: Request):
        manager: HospitalManager = request.app.state.manager
        return create_success_response(HealthResponse(
            status="ok",
            app=settings.APP_NAME,
            version=settings.APP_VERSION,
            doctors=len(manager.get_all_doctors()),
            patients=len(manager.get_all_patients()),
            appointments=len(manager.get_all_appointments()),
        ).model_dump())

    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} ready")
    return app


app = create_app()


# ------------------------
# Run with uvicorn
# ------------------------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "clinic.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
