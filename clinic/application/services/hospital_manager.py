import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ...exceptions import CapacityExceededError, ConflictError, InvalidArgumentError, NotFoundError, OutOfRangeError
from ...models import Appointment, Doctor, Patient, Schedule, Specialization, VisitRecord
from ..ports.audit_logger import AuditLogger

logger = logging.getLogger(__name__)

OPENING_TIME = time(8, 0)
CLOSING_TIME = time(19, 0)


@dataclass
class HospitalManager:
    """Registry of doctors and patients plus the shared appointment schedule.

    Every write goes through this class: it checks the business rules
    (opening hours, double booking, known ids) and only then touches the
    schedule or a medical card. Not safe for concurrent use; callers that
    share one instance across threads must serialize access to it.
    """

    audit_logger: Optional[AuditLogger] = None
    opening_time: time = OPENING_TIME
    closing_time: time = CLOSING_TIME
    cascade_on_remove: bool = False
    _doctors: List[Doctor] = field(default_factory=list, init=False, repr=False)
    _patients: List[Patient] = field(default_factory=list, init=False, repr=False)
    _schedule: Schedule = field(default_factory=Schedule, init=False, repr=False)

    def _audit(self, action: str, entity: str, entity_id: Optional[int] = None, details: Optional[Dict[str, Any]] = None) -> None:
        if self.audit_logger is not None:
            self.audit_logger.log(action, entity, entity_id=entity_id, success=True, details=details)

    # ------------------------
    # Doctors
    # ------------------------

    def add_doctor(self, doctor: Doctor) -> None:
        if doctor is None:
            raise InvalidArgumentError("Doctor cannot be None.")
        if self.get_doctor_by_id(doctor.id) is not None:
            raise ConflictError(f"Doctor with ID {doctor.id} already exists.")
        self._doctors.append(doctor)
        self._audit("doctor.add", "doctor", doctor.id)

    def remove_doctor(self, doctor_id: int, cascade: Optional[bool] = None) -> bool:
        doctor = self.get_doctor_by_id(doctor_id)
        if doctor is None:
            raise NotFoundError(f"Doctor with ID {doctor_id} can not be removed.")
        self._doctors.remove(doctor)
        dropped = 0
        if self.cascade_on_remove if cascade is None else cascade:
            dropped = self._drop_appointments(self._schedule.for_doctor(doctor))
        self._audit("doctor.remove", "doctor", doctor_id, {"appointments_removed": dropped})
        return True

    def update_doctor(
        self,
        doctor_id: int,
        last_name: str,
        first_name: str,
        birth_date: date,
        specializations: Optional[Iterable[Specialization]] = None,
    ) -> bool:
        doctor = self.get_doctor_by_id(doctor_id)
        if doctor is None:
            raise NotFoundError(f"Doctor with ID {doctor_id} can not be updated.")
        # the only step that can fail goes first so a rejected update changes nothing
        if specializations is not None:
            doctor.update_specializations(specializations)
        doctor.last_name = last_name
        doctor.first_name = first_name
        doctor.birth_date = birth_date
        self._audit("doctor.update", "doctor", doctor_id)
        return True

    def get_doctor_by_id(self, doctor_id: int) -> Optional[Doctor]:
        return next((d for d in self._doctors if d.id == doctor_id), None)

    def get_all_doctors(self) -> List[Doctor]:
        return list(self._doctors)

    def search_doctors(
        self,
        last_name: Optional[str] = None,
        first_name: Optional[str] = None,
        specialization: Optional[str] = None,
    ) -> List[Doctor]:
        """Doctors matching every given filter, case-insensitively.

        A missing or blank filter matches everyone. The specialization filter
        matches when any of the doctor's specializations has that name.
        """
        last_key = _filter_key(last_name)
        first_key = _filter_key(first_name)
        spec_key = _filter_key(specialization)

        results = []
        for d in self._doctors:
            if last_key is not None and d.last_name.lower() != last_key:
                continue
            if first_key is not None and d.first_name.lower() != first_key:
                continue
            if spec_key is not None and not any(s.key == spec_key for s in d.specializations):
                continue
            results.append(d)
        return results

    # ------------------------
    # Patients
    # ------------------------

    def add_patient(self, patient: Patient) -> None:
        if patient is None:
            raise InvalidArgumentError("Patient cannot be None.")
        if self.get_patient_by_id(patient.id) is not None:
            raise ConflictError(f"Patient with ID {patient.id} already exists.")
        self._patients.append(patient)
        self._audit("patient.add", "patient", patient.id)

    def remove_patient(self, patient_id: int, cascade: Optional[bool] = None) -> bool:
        patient = self.get_patient_by_id(patient_id)
        if patient is None:
            raise NotFoundError(f"Patient with ID {patient_id} can not be removed.")
        self._patients.remove(patient)
        dropped = 0
        if self.cascade_on_remove if cascade is None else cascade:
            dropped = self._drop_appointments(self._schedule.for_patient(patient))
        self._audit("patient.remove", "patient", patient_id, {"appointments_removed": dropped})
        return True

    def update_patient(self, patient_id: int, last_name: str, first_name: str, birth_date: date) -> bool:
        patient = self.get_patient_by_id(patient_id)
        if patient is None:
            raise NotFoundError(f"Patient with ID {patient_id} can not be updated.")
        patient.last_name = last_name
        patient.first_name = first_name
        patient.birth_date = birth_date
        self._audit("patient.update", "patient", patient_id)
        return True

    def get_patient_by_id(self, patient_id: int) -> Optional[Patient]:
        return next((p for p in self._patients if p.id == patient_id), None)

    def get_all_patients(self) -> List[Patient]:
        return list(self._patients)

    def search_patients_by_name(self, last_name: str, first_name: str) -> List[Patient]:
        last_key = (last_name or "").lower()
        first_key = (first_name or "").lower()
        return [
            p for p in self._patients
            if p.last_name.lower() == last_key and p.first_name.lower() == first_key
        ]

    # ------------------------
    # Appointments
    # ------------------------

    def _check_opening_hours(self, appointment: Appointment) -> None:
        time_of_day = appointment.appointment_date.time()
        if time_of_day < self.opening_time or time_of_day > self.closing_time:
            logger.warning(f"Rejected appointment at {appointment.appointment_date}: outside opening hours")
            raise OutOfRangeError(
                f"Appointments can only be scheduled between "
                f"{self.opening_time:%H:%M} and {self.closing_time:%H:%M}."
            )

    def _check_conflict(self, appointment: Appointment, ignore: Optional[Appointment] = None) -> None:
        for existing in self._schedule.for_doctor(appointment.doctor):
            if existing is ignore:
                continue
            if existing.appointment_date == appointment.appointment_date:
                logger.warning(
                    f"Rejected appointment for doctor {appointment.doctor.id} at "
                    f"{appointment.appointment_date}: slot already booked"
                )
                raise ConflictError("The doctor already has an appointment at this time.")

    def _drop_appointments(self, appointments: List[Appointment]) -> int:
        for a in appointments:
            self._schedule.remove(a)
        return len(appointments)

    def add_appointment(self, appointment: Appointment) -> None:
        if appointment is None:
            raise InvalidArgumentError("Appointment cannot be None.")
        self._check_opening_hours(appointment)
        self._check_conflict(appointment)
        self._schedule.add(appointment)
        self._audit("appointment.add", "appointment", appointment.doctor.id, _appointment_details(appointment))

    def remove_appointment(self, appointment: Appointment) -> None:
        if appointment is None:
            raise InvalidArgumentError("Appointment cannot be None.")
        if appointment not in self._schedule:
            raise NotFoundError("Appointment was not found in the schedule.")
        self._schedule.remove(appointment)
        self._audit("appointment.remove", "appointment", appointment.doctor.id, _appointment_details(appointment))

    def update_appointment(self, old_appointment: Appointment, new_appointment: Appointment) -> bool:
        """Replace old_appointment with new_appointment.

        All checks run before the schedule is touched, so a failure leaves
        the schedule exactly as it was. The old appointment does not count
        as a conflict for the new one.
        """
        if old_appointment is None or new_appointment is None:
            raise InvalidArgumentError("Appointment can not be None.")
        self._check_opening_hours(new_appointment)
        self._check_conflict(new_appointment, ignore=old_appointment)
        if old_appointment not in self._schedule:
            raise NotFoundError("Appointment to update was not found in the schedule.")

        self._schedule.remove(old_appointment)
        self._schedule.add(new_appointment)
        self._audit(
            "appointment.update",
            "appointment",
            new_appointment.doctor.id,
            {"from": _appointment_details(old_appointment), "to": _appointment_details(new_appointment)},
        )
        return True

    def get_all_appointments(self) -> List[Appointment]:
        return sorted(self._schedule.appointments, key=lambda a: a.appointment_date)

    def get_appointments_for_doctor(self, doctor: Doctor) -> List[Appointment]:
        if doctor is None:
            raise InvalidArgumentError("Doctor cannot be None.")
        return self._schedule.for_doctor(doctor)

    def get_appointments_for_patient(self, patient: Patient) -> List[Appointment]:
        if patient is None:
            raise InvalidArgumentError("Patient cannot be None.")
        return self._schedule.for_patient(patient)

    def get_appointments_for_doctor_in_range(self, doctor: Doctor, start: datetime, end: datetime) -> List[Appointment]:
        if doctor is None:
            raise InvalidArgumentError("Doctor cannot be None.")
        return [a for a in self._schedule.for_doctor(doctor) if start <= a.appointment_date <= end]

    def get_appointments_at_time(self, moment: datetime) -> List[Appointment]:
        return [a for a in self._schedule.appointments if a.appointment_date == moment]

    def get_upcoming_appointments(self, now: datetime) -> List[Appointment]:
        return [a for a in self.get_all_appointments() if a.appointment_date >= now]

    # ------------------------
    # Medical records
    # ------------------------

    def add_visit_record(self, patient_id: int, record: VisitRecord) -> None:
        patient = self.get_patient_by_id(patient_id)
        if patient is None:
            raise NotFoundError(f"Patient with ID {patient_id} was not found.")
        if record is None:
            raise InvalidArgumentError("Visit record cannot be None.")
        try:
            patient.medical_card.add_visit(record)
        except CapacityExceededError:
            logger.warning(f"Rejected visit record for patient {patient_id}: medical card is full")
            raise
        self._audit("visit.add", "patient", patient_id, {"diagnosis": record.diagnosis.code})

    def get_visit_records(self, patient_id: int) -> Tuple[VisitRecord, ...]:
        patient = self.get_patient_by_id(patient_id)
        if patient is None:
            raise NotFoundError(f"Patient with ID {patient_id} was not found.")
        return patient.medical_card.visit_records

    def remove_visit_record(self, patient_id: int, record: VisitRecord) -> bool:
        patient = self.get_patient_by_id(patient_id)
        if patient is None or record is None:
            return False
        removed = patient.medical_card.remove_visit(record)
        if removed:
            self._audit("visit.remove", "patient", patient_id, {"diagnosis": record.diagnosis.code})
        return removed


def _filter_key(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.lower()


def _appointment_details(appointment: Appointment) -> Dict[str, Any]:
    return {
        "patient_id": appointment.patient.id,
        "doctor_id": appointment.doctor.id,
        "appointment_date": appointment.appointment_date.isoformat(),
    }
