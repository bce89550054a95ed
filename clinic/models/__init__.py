# Models package (re-export feature modules for stable imports)
from .specialization import Specialization
from .medical_card import MedicalCard
from .person import Person, Doctor, Patient
from .records import Diagnosis, VisitRecord
from .appointment import Appointment
from .schedule import Schedule

__all__ = [
    "Specialization",
    "MedicalCard",
    "Person",
    "Doctor",
    "Patient",
    "Diagnosis",
    "VisitRecord",
    "Appointment",
    "Schedule",
]
