"""Sound engine interface consumed by callers of the theory layer."""

from .synthesis import Player, Synth  # noqa: F401
