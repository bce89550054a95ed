import pytest
from datetime import date, datetime

from clinic.application.services.hospital_manager import HospitalManager
from clinic.exceptions import CapacityExceededError, InvalidArgumentError, NotFoundError
from clinic.models import Diagnosis, Doctor, Patient, VisitRecord


def setup_clinic():
    svc = HospitalManager()
    doctor = Doctor(6, "Peterson", "Will", date(1988, 4, 12))
    patient = Patient(1, "Johnson", "Anna", date(2010, 7, 4))
    svc.add_doctor(doctor)
    svc.add_patient(patient)
    return svc, doctor, patient


def make_record(patient, doctor, code="J01"):
    return VisitRecord(patient, doctor, datetime(2024, 1, 5, 10), Diagnosis(code, "Flu", "High fever"), "Prescribed antibiotics")


def test_add_and_get_visit_records():
    svc, doctor, patient = setup_clinic()
    r1, r2 = make_record(patient, doctor), make_record(patient, doctor, "I10")
    svc.add_visit_record(patient.id, r1)
    svc.add_visit_record(patient.id, r2)
    assert svc.get_visit_records(patient.id) == (r1, r2)


def test_add_visit_record_unknown_patient():
    svc, doctor, patient = setup_clinic()
    with pytest.raises(NotFoundError):
        svc.add_visit_record(42, make_record(patient, doctor))
    with pytest.raises(NotFoundError):
        svc.get_visit_records(42)


def test_add_visit_record_none():
    svc, _, patient = setup_clinic()
    with pytest.raises(InvalidArgumentError):
        svc.add_visit_record(patient.id, None)


def test_101st_record_rejected():
    svc, doctor, patient = setup_clinic()
    for i in range(100):
        svc.add_visit_record(patient.id, make_record(patient, doctor, f"C{i}"))
    with pytest.raises(CapacityExceededError):
        svc.add_visit_record(patient.id, make_record(patient, doctor, "C100"))
    assert len(svc.get_visit_records(patient.id)) == 100


def test_remove_visit_record_is_lenient():
    svc, doctor, patient = setup_clinic()
    record = make_record(patient, doctor)
    svc.add_visit_record(patient.id, record)

    assert svc.remove_visit_record(999, record) is False
    assert svc.remove_visit_record(patient.id, None) is False
    assert svc.remove_visit_record(patient.id, make_record(patient, doctor)) is False
    assert svc.remove_visit_record(patient.id, record) is True
    assert svc.get_visit_records(patient.id) == ()
