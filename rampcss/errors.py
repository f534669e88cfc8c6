"""Exceptions raised by the ramp engine and the token builder."""


class RampError(ValueError):
    """Base class for every failure reported by rampcss."""


class InvalidColorError(RampError):
    """The input is not a recognised colour representation."""

    def __init__(self, value: object, reason: str = "Invalid hex color"):
        self.value = value
        super().__init__(f"{reason}: {value!r}")


class ConversionError(RampError):
    """Gamut clamping or a colour-space conversion produced no finite value."""


class MissingReferenceError(RampError):
    """A theme role points at a palette id that has no primitive ramp."""

    def __init__(self, theme: str, role: str, color_id: str):
        self.theme = theme
        self.role = role
        self.color_id = color_id
        super().__init__(
            f"Theme {theme!r} role {role!r} references unknown color id {color_id!r}"
        )
