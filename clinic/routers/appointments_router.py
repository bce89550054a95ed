from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Depends, Query
import logging

from ..application.ports.clock import Clock
from ..application.services.hospital_manager import HospitalManager
from ..dependencies import get_clock, get_manager
from ..schemas import AppointmentResponse
from .converters import appointment_to_response, to_local_naive

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.get("/", response_model=List[AppointmentResponse])
def get_appointments(
    at: Optional[datetime] = Query(None, description="Only appointments at exactly this instant"),
    manager: HospitalManager = Depends(get_manager),
):
    if at is not None:
        at = to_local_naive(at)
        appointments = manager.get_appointments_at_time(at)
        logger.debug(f"{len(appointments)} appointments at {at.isoformat()}")
    else:
        appointments = manager.get_all_appointments()
    return [appointment_to_response(a) for a in appointments]


@router.get("/upcoming", response_model=List[AppointmentResponse])
def get_upcoming_appointments(
    manager: HospitalManager = Depends(get_manager),
    clock: Clock = Depends(get_clock),
):
    return [appointment_to_response(a) for a in manager.get_upcoming_appointments(clock.now())]
