from fastapi import Request

from .application.ports.clock import Clock
from .application.services.hospital_manager import HospitalManager


def get_manager(request: Request) -> HospitalManager:
    return request.app.state.manager


def get_clock(request: Request) -> Clock:
    return request.app.state.clock
