from dataclasses import dataclass
from datetime import datetime

from ..exceptions import InvalidArgumentError
from .person import Doctor, Patient


@dataclass(frozen=True, eq=False)
class Appointment:
    """A patient's visit to a doctor at a single instant.

    Appointments are never edited in place: rescheduling replaces one
    instance with another, so equality is identity.
    """

    patient: Patient
    doctor: Doctor
    appointment_date: datetime

    def __post_init__(self):
        if self.patient is None:
            raise InvalidArgumentError("Patient cannot be None.")
        if self.doctor is None:
            raise InvalidArgumentError("Doctor cannot be None.")
        if self.appointment_date is None:
            raise InvalidArgumentError("Appointment date cannot be None.")
