import pytest
from pydantic import ValidationError
from rpg_engine.core.component import Component

class Counter(Component):
    value: int = 0
    tags: list[str] = []

def test_validate_assignment():
    counter = Counter()
    with pytest.raises(ValidationError):
        counter.value = "not a number"

def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        Counter(valeu=3)
