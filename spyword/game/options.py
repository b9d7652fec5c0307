"""
Declarative options for a Spyword session.

Usage:
    @dataclass
    class RoundOptions(GameOptions):
        player_count: int = option_field(
            IntOption(default=4, min_val=2, max_val=20,
                      value_key="count",
                      label="spyword-set-player-count"))
"""

from dataclasses import dataclass, field, fields
from typing import Any, Callable

from mashumaro.mixins.json import DataClassJSONMixin

from .rules import MAX_PLAYERS, MIN_PLAYERS
from ..messages.localization import Localization


@dataclass
class OptionMeta:
    """Metadata for an option."""

    default: Any
    label: str  # Localization key for the option label

    def get_label_kwargs(self, value: Any) -> dict[str, Any]:
        raise NotImplementedError

    def get_label(self, locale: str, value: Any) -> str:
        """Get the localized label with current value interpolated."""
        return Localization.get(locale, self.label, **self.get_label_kwargs(value))

    def validate_and_convert(self, value: str) -> tuple[bool, Any]:
        """Validate and convert input string to the option's type.

        Returns (success, converted_value). If success is False, converted_value
        is the original string.
        """
        raise NotImplementedError


@dataclass
class IntOption(OptionMeta):
    """Integer option with min/max validation."""

    min_val: int = 0
    max_val: int = 100
    value_key: str = "count"  # Key used in localization

    def get_label_kwargs(self, value: Any) -> dict[str, Any]:
        return {self.value_key: value}

    def validate_and_convert(self, value: str) -> tuple[bool, Any]:
        try:
            int_val = int(value)
            int_val = max(self.min_val, min(self.max_val, int_val))
            return True, int_val
        except ValueError:
            return False, value


@dataclass
class MenuOption(OptionMeta):
    """Menu selection option."""

    choices: list[str] | Callable[[], list[str]] = field(default_factory=list)
    value_key: str = "choice"

    def get_label_kwargs(self, value: Any) -> dict[str, Any]:
        return {self.value_key: value}

    def get_choices(self) -> list[str]:
        if callable(self.choices):
            return self.choices()
        return list(self.choices)

    def validate_and_convert(self, value: str) -> tuple[bool, Any]:
        if value in self.get_choices():
            return True, value
        return False, value


def option_field(meta: OptionMeta) -> Any:
    """Create a dataclass field with option metadata attached.

    Usage:
        player_count: int = option_field(IntOption(default=4, ...))
    """
    return field(default=meta.default, metadata={"option_meta": meta})


def get_option_meta(options_class: type, field_name: str) -> OptionMeta | None:
    """Get the OptionMeta for a field, if it has one."""
    for f in fields(options_class):
        if f.name == field_name:
            return f.metadata.get("option_meta")
    return None


def get_all_option_metas(options_class: type) -> dict[str, OptionMeta]:
    """Get all OptionMeta instances from an options class."""
    result = {}
    for f in fields(options_class):
        meta = f.metadata.get("option_meta")
        if meta is not None:
            result[f.name] = meta
    return result


def _available_locales() -> list[str]:
    try:
        return sorted(Localization.get_available_languages())
    except OSError:
        return ["en"]


@dataclass
class GameOptions(DataClassJSONMixin):
    """Base class for options with declarative option support."""

    def get_option_metas(self) -> dict[str, OptionMeta]:
        return get_all_option_metas(type(self))

    def set_option(self, name: str, value: str) -> bool:
        """Parse and apply a raw string value to option ``name``.

        Returns False if the option is unknown or the value is rejected.
        """
        meta = get_option_meta(type(self), name)
        if meta is None:
            return False
        success, converted = meta.validate_and_convert(value)
        if not success:
            return False
        setattr(self, name, converted)
        return True


@dataclass
class RoundOptions(GameOptions):
    """Options the host picks before starting a round."""

    player_count: int = option_field(
        IntOption(
            default=4,
            min_val=MIN_PLAYERS,
            max_val=MAX_PLAYERS,
            value_key="count",
            label="spyword-set-player-count",
        )
    )
    locale: str = option_field(
        MenuOption(
            default="en",
            choices=_available_locales,
            value_key="locale",
            label="spyword-set-locale",
        )
    )
