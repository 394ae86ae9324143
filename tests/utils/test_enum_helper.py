"""
Tests for EnumHelper.
"""

import pytest

from chart_animator.models.enums import Dimension, EasingOption, LogLevel
from chart_animator.utils.enum_helper import EnumHelper


def test_from_string_case_and_dashes():
    assert EnumHelper.from_string(EasingOption, "ease-in-out-sine") is EasingOption.EASE_IN_OUT_SINE
    assert EnumHelper.from_string(EasingOption, " Linear ") is EasingOption.LINEAR
    assert EnumHelper.from_string(Dimension, "x") is Dimension.X


def test_from_string_unknown_raises_with_choices():
    with pytest.raises(ValueError, match="Invalid EasingOption name") as exc:
        EnumHelper.from_string(EasingOption, "wobble")
    assert "ease_out_bounce" in str(exc.value)


@pytest.mark.parametrize("value", [5, None, ["debug"], {"name": "INFO"}])
def test_from_string_rejects_non_strings(value):
    with pytest.raises(ValueError, match="must be a string"):
        EnumHelper.from_string(LogLevel, value)


def test_to_string():
    assert EnumHelper.to_string(EasingOption.EASE_OUT_BACK) == "EASE_OUT_BACK"
    with pytest.raises(TypeError):
        EnumHelper.to_string("X")


def test_list_names():
    assert EnumHelper.list_names(Dimension) == ["X", "Y", "H"]
    assert "ease_in_quad" in EnumHelper.list_names(EasingOption, lowercase=True)
