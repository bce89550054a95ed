from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..exceptions import InvalidArgumentError
from .person import Doctor, Patient


@dataclass(frozen=True)
class Diagnosis:
    code: str
    name: str
    description: Optional[str] = None

    def __post_init__(self):
        if not self.code or not self.code.strip() or not self.name or not self.name.strip():
            raise InvalidArgumentError("Code and name of diagnosis cannot be empty.")

    def __str__(self) -> str:
        return f"{self.code}: {self.name}"


# eq=False: records are matched by identity when removed from a card
@dataclass(frozen=True, eq=False)
class VisitRecord:
    patient: Patient
    doctor: Doctor
    visit_date: datetime
    diagnosis: Diagnosis
    notes: Optional[str] = field(default=None)

    def __post_init__(self):
        if self.patient is None:
            raise InvalidArgumentError("Patient cannot be None.")
        if self.doctor is None:
            raise InvalidArgumentError("Doctor cannot be None.")
        if self.diagnosis is None:
            raise InvalidArgumentError("Diagnosis cannot be None.")
