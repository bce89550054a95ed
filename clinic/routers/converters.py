from datetime import datetime
from typing import Optional

from ..models import Appointment, Doctor, Patient, VisitRecord
from ..schemas import (
    AppointmentResponse,
    DiagnosisResponse,
    DoctorResponse,
    PatientResponse,
    VisitRecordResponse,
)


def doctor_to_response(d: Doctor) -> DoctorResponse:
    return DoctorResponse(
        id=d.id,
        last_name=d.last_name,
        first_name=d.first_name,
        full_name=d.full_name,
        birth_date=d.birth_date,
        specializations=[s.name for s in d.specializations],
    )


def patient_to_response(p: Patient) -> PatientResponse:
    return PatientResponse(
        id=p.id,
        last_name=p.last_name,
        first_name=p.first_name,
        full_name=p.full_name,
        birth_date=p.birth_date,
        visit_count=len(p.medical_card),
    )


def visit_to_response(r: VisitRecord) -> VisitRecordResponse:
    return VisitRecordResponse(
        patient_id=r.patient.id,
        doctor_id=r.doctor.id,
        doctor_name=r.doctor.full_name,
        visit_date=r.visit_date,
        diagnosis=DiagnosisResponse(
            code=r.diagnosis.code,
            name=r.diagnosis.name,
            description=r.diagnosis.description,
        ),
        notes=r.notes,
    )


def appointment_to_response(a: Appointment) -> AppointmentResponse:
    return AppointmentResponse(
        appointment_date=a.appointment_date,
        doctor_id=a.doctor.id,
        doctor_name=a.doctor.full_name,
        patient_id=a.patient.id,
        patient_name=a.patient.full_name,
    )


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Appointment instants are naive local time; bring query values in line."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
