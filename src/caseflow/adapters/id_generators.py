"""ID generators for case identities."""

import itertools
import threading
import uuid

from ulid import monotonic

from caseflow.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """Random UUIDv4 identifiers in canonical 36-character form.

    This is the default scheme for case ids.
    """

    def new_id(self) -> str:
        return str(uuid.uuid4())


class ULIDGenerator(IdGenerator):
    """Monotonic ULID identifiers (26 characters, sortable by creation time).

    Useful when ids should sort in creation order. Generation is serialized
    across threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return str(monotonic.new())


class SequentialIdGenerator(IdGenerator):
    """Predictable ids such as ``case-000001``.

    Note:
        Not suitable for production use; intended for tests and demos.
    """

    def __init__(self, prefix: str = "case", width: int = 6) -> None:
        self._counter = itertools.count(1)
        self._prefix = prefix
        self._width = width

    def new_id(self) -> str:
        return f"{self._prefix}-{next(self._counter):0{self._width}d}"


ID_GENERATORS: dict[str, type[IdGenerator]] = {
    "uuid4": UUIDv4Generator,
    "ulid": ULIDGenerator,
    "sequential": SequentialIdGenerator,
}


def make_id_generator(scheme: str) -> IdGenerator:
    """Build an ID generator by scheme name (``uuid4``, ``ulid``, ``sequential``).

    Raises:
        ValueError: If the scheme is unknown.
    """
    try:
        return ID_GENERATORS[scheme.strip().lower()]()
    except KeyError as e:
        known = ", ".join(sorted(ID_GENERATORS))
        raise ValueError(
            f"Unknown id scheme {scheme!r}; expected one of: {known}"
        ) from e
