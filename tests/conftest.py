"""Shared pytest fixtures for guardclause tests."""

from decimal import Decimal

import pytest


class Record:
    """Plain object with instance attributes."""

    def __init__(self, **fields):
        for key, field_value in fields.items():
            setattr(self, key, field_value)


class Slotted:
    """Object without an instance __dict__."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value


@pytest.fixture
def populated_record() -> Record:
    """A plain object carrying one attribute."""
    return Record(name="alpha")


@pytest.fixture
def bare_record() -> Record:
    """A plain object carrying no attributes."""
    return Record()


@pytest.fixture
def slotted() -> Slotted:
    """An instance of a __slots__ class."""
    return Slotted(1)


@pytest.fixture(params=[float("nan"), Decimal("NaN"), complex(float("nan"), 0)])
def nan_value(request):
    """Each numeric flavour of NaN."""
    return request.param
