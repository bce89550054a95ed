import logging
from datetime import date, datetime, time, timedelta

from .application.ports.clock import Clock
from .application.services.hospital_manager import HospitalManager
from .models import Appointment, Diagnosis, Doctor, Patient, Specialization, VisitRecord

logger = logging.getLogger(__name__)


def _doctor(id: int, last_name: str, first_name: str, birth_date: date, specialization: str) -> Doctor:
    d = Doctor(id, last_name, first_name, birth_date)
    d.add_specialization(Specialization(specialization))
    return d


def seed_demo_data(manager: HospitalManager, clock: Clock) -> None:
    """Load a small demo clinic, with dates relative to clock.now()."""
    today = datetime.combine(clock.now().date(), time.min)

    dr_john = _doctor(1, "Smith", "John", date(1975, 3, 15), "Pediatrician")
    dr_emily = _doctor(2, "Jones", "Emily", date(1980, 6, 20), "Cardiologist")
    dr_michael = _doctor(3, "Williams", "Michael", date(1978, 11, 5), "Pediatrician")
    dr_olivia = _doctor(4, "Brown", "Olivia", date(1985, 1, 25), "Orthopedist")
    dr_james = _doctor(5, "Taylor", "James", date(1970, 9, 10), "Ophthalmologist")
    for d in (dr_john, dr_emily, dr_michael, dr_olivia, dr_james):
        manager.add_doctor(d)

    dr_emily.add_specialization(Specialization("Internal Medicine"))

    dr_will = _doctor(6, "Peterson", "Will", date(1988, 4, 12), "Pediatrician")
    manager.add_doctor(dr_will)
    manager.remove_doctor(dr_john.id)

    anna = Patient(1, "Johnson", "Anna", date(2010, 7, 4))
    david = Patient(2, "Williams", "David", date(1985, 2, 16))
    sophia = Patient(3, "Miller", "Sophia", date(1990, 12, 30))
    chris = Patient(4, "Taylor", "Chris", date(2000, 5, 21))
    for p in (anna, david, sophia, chris):
        manager.add_patient(p)
    manager.remove_patient(david.id)

    flu = Diagnosis("J01", "Flu", "High fever")
    hypertension = Diagnosis("I10", "Hypertension", "High blood pressure")
    cold = Diagnosis("R50", "Cold", "Light coughing")
    manager.add_visit_record(anna.id, VisitRecord(anna, dr_will, today - timedelta(days=10), flu, "Prescribed antibiotics"))
    manager.add_visit_record(anna.id, VisitRecord(anna, dr_emily, today - timedelta(days=5), hypertension, "Recommended lifestyle changes"))
    manager.add_visit_record(anna.id, VisitRecord(anna, dr_michael, today, cold, "Advised rest and hydration"))

    first = Appointment(anna, dr_will, today + timedelta(days=1, hours=9))
    manager.add_appointment(first)
    manager.add_appointment(Appointment(chris, dr_emily, today + timedelta(days=2, hours=10)))
    manager.update_appointment(first, Appointment(anna, dr_will, today + timedelta(days=1, hours=11)))
    manager.add_appointment(Appointment(chris, dr_olivia, today + timedelta(days=3, hours=14)))

    logger.info(
        f"Demo data loaded: {len(manager.get_all_doctors())} doctors, "
        f"{len(manager.get_all_patients())} patients, "
        f"{len(manager.get_all_appointments())} appointments"
    )
