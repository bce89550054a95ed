# clinic/schemas/doctor.py
from pydantic import BaseModel
from typing import List, Optional
from datetime import date


class DoctorResponse(BaseModel):
    id: int
    last_name: str
    first_name: str
    full_name: str
    birth_date: date
    specializations: List[str] = []


class DoctorFilters(BaseModel):
    last_name: Optional[str] = None
    first_name: Optional[str] = None
    specialization: Optional[str] = None
