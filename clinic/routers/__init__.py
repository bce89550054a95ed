# Routers package
from . import doctors_router
from . import patients_router
from . import appointments_router

__all__ = [
    "doctors_router",
    "patients_router",
    "appointments_router",
]
