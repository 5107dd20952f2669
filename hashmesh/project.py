"""Project-wide build options and version information."""

from __future__ import annotations

from typing import Mapping, Optional

_PREFIX = "This argument is not supported in this version of program; "

# Code levels, from the most stable; each one requires all before it.
_LEVELS = ("normal", "preview", "experiment", "experiment_dangerous")
_CRYPTO = ("ntru", "sidh")

_DEFAULT_FEATURES: dict[str, bool] = {
    "normal": True,
    "preview": False,
    "experiment": False,
    "experiment_dangerous": False,
    "ntru": False,
    "sidh": False,
}


class InvalidArgumentInVersion(ValueError):
    """An argument that this version of the program does not support."""

    def __init__(self, what_arg: str) -> None:
        super().__init__(_PREFIX + what_arg)


def enabled_or_disabled(v: bool) -> str:
    """Return "ENABLED" for a true flag, otherwise "disabled"."""
    if bool(v):
        return "ENABLED"
    return "disabled"


def _resolve(features: Optional[Mapping[str, bool]]) -> dict[str, bool]:
    resolved = dict(_DEFAULT_FEATURES)
    if features:
        unknown = set(features) - set(resolved)
        if unknown:
            raise ValueError(f"Unknown build features: {', '.join(sorted(unknown))}")
        resolved.update({name: bool(flag) for name, flag in features.items()})
    for higher, lower in zip(_LEVELS[1:], _LEVELS):
        if resolved[higher] and not resolved[lower]:
            raise ValueError("The EXTLEVEL_ settings are not consistent")
    return resolved


def project_version_info(features: Optional[Mapping[str, bool]] = None) -> str:
    """Describe the build options: code levels and enabled crypto features."""
    flags = _resolve(features)
    lines = [
        "Program build options: ",
        f"Code level: normal code: {enabled_or_disabled(flags['normal'])}",
        f"Code level: preview code: {enabled_or_disabled(flags['preview'])}",
        f"Code level: experimental code: {enabled_or_disabled(flags['experiment'])}",
        "Code level: experimental dangerous code: "
        f"{enabled_or_disabled(flags['experiment_dangerous'])}",
        "Enabled features: ",
        f"  * NTRU: {enabled_or_disabled(flags['ntru'])}",
        f"  * SIDH: {enabled_or_disabled(flags['sidh'])}",
    ]
    return "\n".join(lines) + "\n"