from __future__ import annotations

"""Configuration loading and validation for tonescale.

This module loads YAML configuration, applies defaults, falls back on values
the theory layer would reject, and builds typed Pydantic settings.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..theory.note_utils import PITCH_CLASS_NAMES, normalize_name
from ..theory.scale import Scale
from ..theory.scales import SCALE_PATTERNS, normalize_pattern_name
from ..util.randomness import BACKENDS

logger = logging.getLogger(__name__)

ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ScaleSection(BaseModel):
    tonic: str = "C"
    pattern: str = "major"
    octave: int = 4


class RangeSection(BaseModel):
    start_octave: int = 3
    end_octave: int = 5


class RandomSection(BaseModel):
    """Random source settings.

    - seed: replayable draws when set
    - backend: "python" or "numpy"
    - count: how many notes the ``random`` command draws (>=0)
    """

    seed: Optional[int] = None
    backend: str = "python"
    count: int = Field(8, ge=0)


class LoggingSection(BaseModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ALLOWED_LOG_LEVELS:
            raise ValueError(f"unknown log level: {v}")
        return v


class AppConfig(BaseModel):
    scale: ScaleSection = Field(default_factory=ScaleSection)
    range: RangeSection = Field(default_factory=RangeSection)
    random: RandomSection = Field(default_factory=RandomSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)

    def build_scale(self) -> Scale:
        return Scale(self.scale.tonic, self.scale.pattern)


def _load_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Any:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        The parsed YAML, normally a dictionary. Other shapes (a list, a
        scalar) are passed on for validate_config to reject.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        cfg = _load_yaml(Path(__file__).with_name("defaults.yml"))
    logger.debug("Loaded config from %s", path or "package defaults")
    return cfg


def validate_config(cfg: Any) -> AppConfig:
    """Apply defaults, repair unusable values and build typed settings.

    Unknown tonics, patterns and random backends fall back to C, major and
    python with a warning; an inverted octave range is swapped. Wrongly typed
    values, including sections that are not mappings, raise
    pydantic.ValidationError.

    Args:
        cfg: The raw configuration, normally a dictionary.

    Returns:
        The validated AppConfig.
    """
    if not isinstance(cfg, dict):
        return AppConfig.model_validate(cfg)

    for section in ("scale", "range", "random", "logging"):
        if cfg.get(section) is None:
            cfg[section] = {}

    scale = cfg["scale"]
    rand = cfg["random"]

    if isinstance(scale, dict):
        scale.setdefault("tonic", "C")
        scale.setdefault("pattern", "major")
        scale.setdefault("octave", 4)

        tonic = normalize_name(str(scale["tonic"]))
        if tonic not in PITCH_CLASS_NAMES:
            logger.warning("Unsupported tonic '%s', using 'C'.", scale["tonic"])
            tonic = "C"
        scale["tonic"] = tonic

        pattern = normalize_pattern_name(str(scale["pattern"]))
        if pattern not in SCALE_PATTERNS:
            logger.warning("Unsupported scale pattern '%s', using 'major'.", scale["pattern"])
            pattern = "major"
        scale["pattern"] = pattern

    if isinstance(rand, dict):
        rand.setdefault("seed", None)
        rand.setdefault("backend", "python")
        rand.setdefault("count", 8)
        if rand["backend"] not in BACKENDS:
            logger.warning("Unsupported random backend '%s', using 'python'.", rand["backend"])
            rand["backend"] = "python"

    app = AppConfig.model_validate(cfg)

    start, end = app.range.start_octave, app.range.end_octave
    if start > end:
        logger.warning("Octave range %s..%s is inverted, swapping.", start, end)
        app.range = RangeSection(start_octave=end, end_octave=start)
    return app
