"""Core option definitions and their delivery to a frontend.

Frontends that know the newest interface receive the full definitions.
Older ones receive a reduced form without categories. The oldest receive
plain ``(key, "Description; default|other|...")`` variables.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Protocol


@dataclass(frozen=True)
class OptionValue:
    """One selectable value of an option, with an optional display label."""

    value: str
    label: str | None = None


@dataclass(frozen=True)
class OptionDefinition:
    """A core option: key, descriptions, allowed values and the default."""

    key: str
    desc: str | None
    info: str | None
    values: tuple[OptionValue, ...]
    default_value: str | None
    desc_categorized: str | None = None
    info_categorized: str | None = None
    category_key: str | None = None


@dataclass(frozen=True)
class OptionCategory:
    """A group of options shown together by frontends that support it."""

    key: str
    desc: str
    info: str | None = None


class OptionFrontend(Protocol):
    """The frontend calls the option setup needs."""

    def core_options_version(self) -> int | None:
        """The option interface version, or None if it cannot be queried."""

    def set_core_options_v2(
        self,
        categories: Sequence[OptionCategory],
        definitions: Sequence[OptionDefinition],
    ) -> bool:
        """Hand over full definitions; return True if categories are supported."""

    def set_core_options(self, definitions: Sequence[OptionDefinition]) -> None:
        """Hand over definitions without category information."""

    def set_variables(self, variables: Sequence[tuple[str, str | None]]) -> None:
        """Hand over legacy ``(key, "desc; default|others")`` variables."""


OPTION_CATEGORIES: tuple[OptionCategory, ...] = ()

_DEFINITIONS: tuple[OptionDefinition, ...] = (
    OptionDefinition(
        key="lynx_rot_screen",
        desc="Auto-rotate Screen",
        info=(
            "Virtually rotate screen orientation and button mappings automatically "
            "for known games. When set to 'Manual', screen rotation is adjusted by "
            "pressing the SELECT button, otherwise a fixed rotation can be set to "
            "either 0, 90, 180 or 270 degrees counter-clockwise."
        ),
        values=(
            OptionValue("auto", "Auto"),
            OptionValue("manual", "Manual"),
            OptionValue("0"),
            OptionValue("90"),
            OptionValue("180"),
            OptionValue("270"),
        ),
        default_value="auto",
    ),
    OptionDefinition(
        key="lynx_pix_format",
        desc="Color Format (Restart Required)",
        info="",
        values=(
            OptionValue("16", "16-Bit (RGB565)"),
            OptionValue("32", "32-Bit (RGB8888)"),
        ),
        default_value="16",
    ),
    OptionDefinition(
        key="lynx_force_60hz",
        desc="Force 60Hz",
        info=(
            "Force 60Hz instead of original 75Hz refresh rate, for perfectly "
            "smooth movement on 60Hz displays"
        ),
        values=(OptionValue("disabled"), OptionValue("enabled")),
        default_value="disabled",
    ),
)


def option_definitions() -> list[OptionDefinition]:
    """The options this core offers, in presentation order."""
    return list(_DEFINITIONS)


def _legacy_value(definition: OptionDefinition) -> str | None:
    if not definition.desc or not definition.values:
        return None
    values = [v.value for v in definition.values]
    default_index = 0
    if definition.default_value is not None:
        for index, value in enumerate(values):
            if value == definition.default_value:
                default_index = index
    ordered = [values[default_index]]
    ordered.extend(v for i, v in enumerate(values) if i != default_index)
    return f"{definition.desc}; " + "|".join(ordered)


def legacy_variables(
    definitions: Sequence[OptionDefinition],
) -> list[tuple[str, str | None]]:
    """Build legacy variables with the default value listed first.

    An option without a description or without values gets ``None``.
    """
    return [(d.key, _legacy_value(d)) for d in definitions]


def to_v1(definitions: Sequence[OptionDefinition]) -> list[OptionDefinition]:
    """Strip category information from the definitions."""
    return [
        replace(d, desc_categorized=None, info_categorized=None, category_key=None)
        for d in definitions
    ]


def apply_core_options(frontend: OptionFrontend | None) -> bool:
    """Deliver the options in the newest form the frontend understands.

    Returns True only if the frontend reports that option categories are
    supported.
    """
    if frontend is None:
        return False

    version = frontend.core_options_version() or 0
    definitions = option_definitions()

    if version >= 2:
        return bool(frontend.set_core_options_v2(list(OPTION_CATEGORIES), definitions))
    if version >= 1:
        frontend.set_core_options(to_v1(definitions))
    else:
        frontend.set_variables(legacy_variables(definitions))
    return False