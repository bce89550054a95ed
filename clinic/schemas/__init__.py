# Schemas package (re-export feature modules for stable imports)
from .common.common import ErrorResponse, HealthResponse
from .doctors.doctor import DoctorResponse, DoctorFilters
from .patients.patient import PatientResponse, VisitRecordResponse, DiagnosisResponse
from .appointments.appointment import AppointmentResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "DoctorResponse",
    "DoctorFilters",
    "PatientResponse",
    "VisitRecordResponse",
    "DiagnosisResponse",
    "AppointmentResponse",
]
