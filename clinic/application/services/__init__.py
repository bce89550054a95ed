from .hospital_manager import HospitalManager

__all__ = ["HospitalManager"]
