from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from ..application.services.hospital_manager import HospitalManager
from ..dependencies import get_manager
from ..exceptions import NotFoundError
from ..models import Patient
from ..schemas import ErrorResponse, AppointmentResponse, PatientResponse, VisitRecordResponse
from .converters import appointment_to_response, patient_to_response, visit_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/patients", tags=["Patients"])


def _get_patient_or_404(manager: HospitalManager, patient_id: int) -> Patient:
    patient = manager.get_patient_by_id(patient_id)
    if patient is None:
        raise NotFoundError(f"Patient with ID {patient_id} was not found.")
    return patient


@router.get("/", response_model=List[PatientResponse])
def get_patients(
    last_name: Optional[str] = Query(None),
    first_name: Optional[str] = Query(None),
    manager: HospitalManager = Depends(get_manager),
):
    if last_name is None and first_name is None:
        patients = manager.get_all_patients()
    elif last_name is None or first_name is None:
        raise HTTPException(status_code=400, detail="Search requires both last_name and first_name")
    else:
        patients = manager.search_patients_by_name(last_name, first_name)
        logger.debug(f"Patient search for {last_name} {first_name} matched {len(patients)}")
    return [patient_to_response(p) for p in patients]


@router.get("/{patient_id}", response_model=PatientResponse, responses={404: {"model": ErrorResponse}})
def get_patient(patient_id: int, manager: HospitalManager = Depends(get_manager)):
    return patient_to_response(_get_patient_or_404(manager, patient_id))


@router.get("/{patient_id}/visits", response_model=List[VisitRecordResponse], responses={404: {"model": ErrorResponse}})
def get_patient_visits(patient_id: int, manager: HospitalManager = Depends(get_manager)):
    return [visit_to_response(r) for r in manager.get_visit_records(patient_id)]


@router.get("/{patient_id}/appointments", response_model=List[AppointmentResponse])
def get_patient_appointments(patient_id: int, manager: HospitalManager = Depends(get_manager)):
    patient = _get_patient_or_404(manager, patient_id)
    appointments = manager.get_appointments_for_patient(patient)
    return [appointment_to_response(a) for a in sorted(appointments, key=lambda a: a.appointment_date)]
