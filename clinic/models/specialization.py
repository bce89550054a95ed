from ..exceptions import InvalidArgumentError


class Specialization:
    """Named medical specialization, compared case-insensitively."""

    __slots__ = ("_name", "_key")

    def __init__(self, name: str):
        if name is None:
            raise InvalidArgumentError("Specialization name cannot be None.")
        if not isinstance(name, str):
            raise InvalidArgumentError("Specialization name must be a string.")
        self._name = name
        self._key = name.lower()

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        return self._key

    def __eq__(self, other) -> bool:
        if not isinstance(other, Specialization):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"Specialization({self._name!r})"

    def __str__(self) -> str:
        return self._name
