import pytest

from stackcalc.display import ERROR_MARKER
from stackcalc.evaluator import Precedence
from stackcalc.keypad import BUTTON_LABELS, Keypad


def test_button_grid() -> None:
    assert BUTTON_LABELS == [
        ["7", "8", "9", "/"],
        ["4", "5", "6", "*"],
        ["1", "2", "3", "-"],
        ["0", "C", "=", "+"],
    ]


@pytest.mark.parametrize(
    "presses, expected_text",
    [
        pytest.param("", ""),
        pytest.param("12", "12"),
        pytest.param("12+3", "12+3"),
        pytest.param("12+3=", "15"),
        pytest.param("7/2=", "3.500000"),
        pytest.param("2*3+4=", "10"),
        pytest.param("2+3*4=", "20"),
        pytest.param("1/0=", ERROR_MARKER),
        pytest.param("+=", ERROR_MARKER),
        pytest.param("=", ERROR_MARKER),
        pytest.param("99C", ""),
        pytest.param("9+9C5=", "5"),
        # results stay on screen and take further input
        pytest.param("1+2=*3=", "9"),
        pytest.param("1/0=5", "Error5"),
        pytest.param("1/0=5=", ERROR_MARKER),
        pytest.param("1/0=C5=", "5"),
    ],
)
def test_press_sequence(presses: str, expected_text: str) -> None:
    keypad = Keypad()
    assert keypad.press_many(presses) == expected_text
    assert keypad.text == expected_text


def test_press_returns_current_text() -> None:
    keypad = Keypad()
    assert keypad.press("4") == "4"
    assert keypad.press("*") == "4*"
    assert keypad.press("5") == "4*5"
    assert keypad.press("=") == "20"
    assert keypad.press("C") == ""


def test_labels_outside_of_grid_are_appended() -> None:
    keypad = Keypad()
    assert keypad.press_many(["(", "1", "+", "2", ")", "*", "1.5", "="]) == "4.500000"


def test_conventional_keypad() -> None:
    keypad = Keypad(precedence=Precedence.CONVENTIONAL)
    assert keypad.press_many("2+3*4=") == "14"
