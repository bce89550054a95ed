# clinic/schemas/patient.py
from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime


class PatientResponse(BaseModel):
    id: int
    last_name: str
    first_name: str
    full_name: str
    birth_date: date
    visit_count: int = 0


class DiagnosisResponse(BaseModel):
    code: str
    name: str
    description: Optional[str] = None


class VisitRecordResponse(BaseModel):
    patient_id: int
    doctor_id: int
    doctor_name: str
    visit_date: datetime
    diagnosis: DiagnosisResponse
    notes: Optional[str] = None
