# type: ignore
import pytest

from stackvm.runtime.machine import Machine


@pytest.fixture
def machine():
    yield Machine()


@pytest.fixture
def tiny_machine():
    yield Machine(capacity=2)
