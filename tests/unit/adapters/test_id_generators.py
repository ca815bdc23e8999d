"""Unit tests for the case id generators."""

import re
import uuid

import pytest

from caseflow.adapters.id_generators import (
    ID_GENERATORS,
    SequentialIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
    make_id_generator,
)

# pylint: disable=magic-value-comparison

ULID_RE = re.compile(r"^[0-9A-HJKMNP-TV-Z]{26}$")


def test_uuid4_ids_are_canonical_and_unique():
    """UUIDv4 ids are 36-character canonical UUIDs."""
    gen = UUIDv4Generator()
    ids = [gen.new_id() for _ in range(100)]
    assert len(set(ids)) == 100
    for value in ids:
        parsed = uuid.UUID(value)
        assert str(parsed) == value
        assert parsed.version == 4


def test_ulids_are_monotonic():
    """ULIDs are Crockford base32 and strictly increasing."""
    gen = ULIDGenerator()
    ids = [gen.new_id() for _ in range(200)]
    assert all(ULID_RE.match(value) for value in ids)
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_sequential_ids():
    """Sequential ids are zero-padded and prefixed."""
    gen = SequentialIdGenerator()
    assert [gen.new_id() for _ in range(3)] == [
        "case-000001",
        "case-000002",
        "case-000003",
    ]
    assert SequentialIdGenerator(prefix="t", width=2).new_id() == "t-01"


@pytest.mark.parametrize("scheme", sorted(ID_GENERATORS))
def test_make_id_generator_known_schemes(scheme):
    """Every registered scheme can be built by name (case-insensitive)."""
    assert isinstance(make_id_generator(f" {scheme.upper()} "), ID_GENERATORS[scheme])


def test_make_id_generator_unknown_scheme():
    """Unknown schemes raise ValueError listing the known ones."""
    with pytest.raises(ValueError, match="expected one of: sequential, ulid, uuid4"):
        make_id_generator("snowflake")

