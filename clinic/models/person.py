from datetime import date
from typing import Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from ..exceptions import CapacityExceededError, InvalidArgumentError
from .medical_card import MedicalCard
from .specialization import Specialization


@runtime_checkable
class Person(Protocol):
    """Fields shared by doctors and patients."""

    id: int
    last_name: str
    first_name: str
    birth_date: date

    @property
    def full_name(self) -> str:
        ...


def _require_names(last_name: Optional[str], first_name: Optional[str]) -> None:
    if not last_name or not last_name.strip() or not first_name or not first_name.strip():
        raise InvalidArgumentError("Name and surname cannot be empty.")


class Doctor:
    MAX_SPECIALIZATIONS = 10

    def __init__(self, id: int, last_name: str, first_name: str, birth_date: date):
        _require_names(last_name, first_name)
        self._id = id
        # names are only checked here; update_doctor assigns them as given
        self.last_name = last_name
        self.first_name = first_name
        self.birth_date = birth_date
        self._specializations: List[Specialization] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def full_name(self) -> str:
        return f"{self.last_name} {self.first_name}"

    @property
    def specializations(self) -> Tuple[Specialization, ...]:
        return tuple(self._specializations)

    def add_specialization(self, specialization: Specialization) -> None:
        if specialization is None:
            raise InvalidArgumentError("Specialization cannot be None.")
        if specialization in self._specializations:
            return
        if len(self._specializations) >= self.MAX_SPECIALIZATIONS:
            raise CapacityExceededError(
                f"A doctor can have at most {self.MAX_SPECIALIZATIONS} specializations."
            )
        self._specializations.append(specialization)

    def remove_specialization(self, specialization: Specialization) -> bool:
        try:
            self._specializations.remove(specialization)
        except ValueError:
            return False
        return True

    def update_specializations(self, specializations: Iterable[Specialization]) -> None:
        """Replace the whole set; nothing changes if the new set is too large."""
        if specializations is None:
            raise InvalidArgumentError("Specializations cannot be None.")
        distinct: List[Specialization] = []
        for s in specializations:
            if s is None:
                raise InvalidArgumentError("Specialization cannot be None.")
            if s not in distinct:
                distinct.append(s)
        if len(distinct) > self.MAX_SPECIALIZATIONS:
            raise CapacityExceededError(
                f"A doctor can have maximum {self.MAX_SPECIALIZATIONS} specializations."
            )
        self._specializations = distinct

    def __repr__(self) -> str:
        return f"Doctor(id={self._id!r}, name={self.full_name!r})"


class Patient:
    def __init__(self, id: int, last_name: str, first_name: str, birth_date: date):
        _require_names(last_name, first_name)
        self._id = id
        self.last_name = last_name
        self.first_name = first_name
        self.birth_date = birth_date
        self._medical_card = MedicalCard()

    @property
    def id(self) -> int:
        return self._id

    @property
    def full_name(self) -> str:
        return f"{self.last_name} {self.first_name}"

    @property
    def medical_card(self) -> MedicalCard:
        return self._medical_card

    def add_medical_record(self, record) -> None:
        if record is None:
            raise InvalidArgumentError("Visit record cannot be None.")
        self._medical_card.add_visit(record)

    def __repr__(self) -> str:
        return f"Patient(id={self._id!r}, name={self.full_name!r})"
