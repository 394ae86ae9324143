"""Config/CLI spelling of enum members ("ease-out-bounce" <-> EASE_OUT_BOUNCE)"""

from enum import Enum
from typing import Any, List, Type, TypeVar

E = TypeVar("E", bound=Enum)


class EnumHelper:
    """
    Used by AnimatorConfig (YAML values) and the demo CLI (--easing).

    Names are matched case-insensitively, with dashes accepted in place of
    underscores, so config files can use either spelling.
    """

    @staticmethod
    def to_string(member: Enum) -> str:
        """Canonical spelling written back to YAML"""
        if not isinstance(member, Enum):
            raise TypeError(f"Expected Enum, got {type(member).__name__}")
        return member.name

    @staticmethod
    def from_string(enum_class: Type[E], value: Any) -> E:
        """
        Resolve a YAML/CLI value to a member of enum_class.

        Raises:
            ValueError: value is not a string or names no member
        """
        if not isinstance(value, str):
            raise ValueError(
                f"{enum_class.__name__} name must be a string, got {type(value).__name__}: {value!r}"
            )

        member = enum_class.__members__.get(value.strip().replace("-", "_").upper())
        if member is None:
            choices = ", ".join(EnumHelper.list_names(enum_class, lowercase=True))
            raise ValueError(f"Invalid {enum_class.__name__} name: {value!r} (choices: {choices})")
        return member

    @staticmethod
    def list_names(enum_class: Type[E], lowercase: bool = False) -> List[str]:
        """Member names in definition order (lowercase for CLI help text)"""
        return [m.name.lower() if lowercase else m.name for m in enum_class]
