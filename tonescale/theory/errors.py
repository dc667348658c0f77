from __future__ import annotations

"""Error types raised by the theory layer."""


class ScaleError(ValueError):
    """Base class for bad musical input."""


class InvalidTonic(ScaleError):
    def __init__(self, tonic: str) -> None:
        super().__init__(f"Unknown tonic: {tonic}")
        self.tonic = tonic


class InvalidPattern(ScaleError):
    def __init__(self, pattern_name: str) -> None:
        super().__init__(f"Unknown scale pattern: {pattern_name}")
        self.pattern_name = pattern_name


class InvalidPitch(ScaleError):
    def __init__(self, pitch: str, reason: str = "") -> None:
        msg = f"Invalid pitch string: {pitch}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.pitch = pitch
