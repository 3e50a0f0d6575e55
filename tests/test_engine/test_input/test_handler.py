import pytest
from rpg_engine.errors import InvalidInput
from rpg_engine.input.handler import ConsoleInput, MenuChoice, parse_menu_choice

def test_parse_valid_choice():
    choice = parse_menu_choice(" 3 \n", 1, 5)
    assert choice.ok
    assert choice.value == 3
    assert choice.error is None

def test_parse_non_numeric():
    choice = parse_menu_choice("attack", 1, 5)
    assert not choice.ok
    assert isinstance(choice.error, InvalidInput)
    assert str(choice.error) == "Invalid input. Please enter a number."

@pytest.mark.parametrize("raw", ["0", "6", "-1"])
def test_parse_out_of_range(raw):
    choice = parse_menu_choice(raw, 1, 5)
    assert not choice.ok
    assert str(choice.error) == "Invalid choice! Please select a number from 1 to 5."

def test_parse_zero_allowed_as_cancel():
    assert parse_menu_choice("0", 0, 2).value == 0

def test_empty_menu_choice_is_not_ok():
    assert not MenuChoice().ok

def test_ask_choice_reprompts_until_valid(scripted_input):
    errors = []
    console_input = ConsoleInput(scripted_input("x", "9", "2"))

    assert console_input.ask_choice("> ", 1, 4, on_error=errors.append) == 2
    assert len(errors) == 2
    assert all(isinstance(e, InvalidInput) for e in errors)

def test_read_choice_passes_prompt():
    prompts = []

    def reader(prompt):
        prompts.append(prompt)
        return "1"

    choice = ConsoleInput(reader).read_choice("Pick: ", 1, 2)
    assert choice.value == 1
    assert prompts == ["Pick: "]

def test_eof_propagates(scripted_input):
    with pytest.raises(EOFError):
        ConsoleInput(scripted_input()).ask_choice("> ", 1, 4)
