from typing import List, Tuple

from ..exceptions import InvalidArgumentError, NotFoundError
from .appointment import Appointment
from .person import Doctor, Patient


class Schedule:
    """All appointments of the clinic, unordered.

    No business rules are applied here; HospitalManager checks opening hours
    and conflicts before calling add().
    """

    def __init__(self) -> None:
        self._appointments: List[Appointment] = []

    @property
    def appointments(self) -> Tuple[Appointment, ...]:
        return tuple(self._appointments)

    def __len__(self) -> int:
        return len(self._appointments)

    def __contains__(self, appointment) -> bool:
        return any(a is appointment for a in self._appointments)

    def add(self, appointment: Appointment) -> None:
        if appointment is None:
            raise InvalidArgumentError("Appointment cannot be None.")
        self._appointments.append(appointment)

    def remove(self, appointment: Appointment) -> None:
        if appointment is None:
            raise InvalidArgumentError("Appointment cannot be None.")
        for index, existing in enumerate(self._appointments):
            if existing is appointment:
                del self._appointments[index]
                return
        raise NotFoundError("Appointment not found in the schedule.")

    def for_doctor(self, doctor: Doctor) -> List[Appointment]:
        if doctor is None:
            raise InvalidArgumentError("Doctor cannot be None.")
        return [a for a in self._appointments if a.doctor is doctor]

    def for_patient(self, patient: Patient) -> List[Appointment]:
        if patient is None:
            raise InvalidArgumentError("Patient cannot be None.")
        return [a for a in self._appointments if a.patient is patient]
