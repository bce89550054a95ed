# clinic/schemas/appointment.py
from pydantic import BaseModel
from datetime import datetime


class AppointmentResponse(BaseModel):
    appointment_date: datetime
    doctor_id: int
    doctor_name: str
    patient_id: int
    patient_name: str
