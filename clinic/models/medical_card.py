from typing import List, Tuple, TYPE_CHECKING

from ..exceptions import CapacityExceededError, InvalidArgumentError

if TYPE_CHECKING:
    from .records import VisitRecord


class MedicalCard:
    """Visit history of one patient, oldest first."""

    MAX_RECORDS = 100

    def __init__(self) -> None:
        self._records: List["VisitRecord"] = []

    @property
    def visit_records(self) -> Tuple["VisitRecord", ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def add_visit(self, record: "VisitRecord") -> None:
        if record is None:
            raise InvalidArgumentError("Visit record cannot be None.")
        if len(self._records) >= self.MAX_RECORDS:
            raise CapacityExceededError(
                f"The medical card can only have {self.MAX_RECORDS} records."
            )
        self._records.append(record)

    def remove_visit(self, record: "VisitRecord") -> bool:
        for index, existing in enumerate(self._records):
            if existing is record:
                del self._records[index]
                return True
        return False
