from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from ..application.services.hospital_manager import HospitalManager
from ..dependencies import get_manager
from ..exceptions import NotFoundError
from ..models import Doctor
from ..schemas import ErrorResponse, AppointmentResponse, DoctorFilters, DoctorResponse
from .converters import appointment_to_response, doctor_to_response, to_local_naive

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/doctors", tags=["Doctors"])


def _get_doctor_or_404(manager: HospitalManager, doctor_id: int) -> Doctor:
    doctor = manager.get_doctor_by_id(doctor_id)
    if doctor is None:
        raise NotFoundError(f"Doctor with ID {doctor_id} was not found.")
    return doctor


@router.get("/", response_model=List[DoctorResponse])
def get_doctors(
    filters: DoctorFilters = Depends(),
    manager: HospitalManager = Depends(get_manager),
):
    doctors = manager.search_doctors(
        last_name=filters.last_name,
        first_name=filters.first_name,
        specialization=filters.specialization,
    )
    logger.debug(f"Doctor search matched {len(doctors)} of {len(manager.get_all_doctors())}")
    return [doctor_to_response(d) for d in doctors]


@router.get("/{doctor_id}", response_model=DoctorResponse, responses={404: {"model": ErrorResponse}})
def get_doctor(doctor_id: int, manager: HospitalManager = Depends(get_manager)):
    return doctor_to_response(_get_doctor_or_404(manager, doctor_id))


@router.get("/{doctor_id}/appointments", response_model=List[AppointmentResponse], responses={404: {"model": ErrorResponse}})
def get_doctor_appointments(
    doctor_id: int,
    start: Optional[datetime] = Query(None),
    end: Optional[datetime] = Query(None),
    manager: HospitalManager = Depends(get_manager),
):
    doctor = _get_doctor_or_404(manager, doctor_id)
    start, end = to_local_naive(start), to_local_naive(end)
    if (start is None) != (end is None):
        raise HTTPException(status_code=400, detail="Both start and end are required for a range query")
    if start is not None:
        if start > end:
            raise HTTPException(status_code=400, detail="start must not be after end")
        appointments = manager.get_appointments_for_doctor_in_range(doctor, start, end)
    else:
        appointments = manager.get_appointments_for_doctor(doctor)
    return [appointment_to_response(a) for a in sorted(appointments, key=lambda a: a.appointment_date)]
