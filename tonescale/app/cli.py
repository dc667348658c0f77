from __future__ import annotations

"""Command line for tonescale: print scale notes, ranges and random draws."""

import argparse
import sys
from typing import List, Optional

from .. import __version__
from ..config.config import AppConfig, load_config, validate_config
from ..theory.errors import ScaleError
from ..theory.note_utils import normalize_name, pitch_to_midi
from ..theory.scale import Scale
from ..theory.scales import SCALE_PATTERNS, normalize_pattern_name
from ..util.log import get_logger, setup_logging
from ..util.randomness import BACKENDS, make_source, random_notes, seed_if_needed

logger = get_logger(__name__)


def _add_scale_args(sp: argparse.ArgumentParser) -> None:
    sp.add_argument("--tonic", default=None, help="Tonic pitch class, e.g. C, F#, Bb")
    sp.add_argument("--pattern", default=None, help="Scale pattern name (see 'patterns')")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tonescale", description="Scale degree to pitch calculator")
    p.add_argument("--config", default=None, help="Path to YAML config")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    p.add_argument("--version", action="version", version=f"tonescale {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("patterns", help="List scale patterns")

    np_ = sub.add_parser("notes", help="Consecutive degrees from the tonic")
    _add_scale_args(np_)
    np_.add_argument("--octave", type=int, default=None)
    np_.add_argument("--count", type=int, default=None, help="Negative walks downwards")
    np_.add_argument("--midi", action="store_true", help="Print MIDI numbers next to pitches")

    rp = sub.add_parser("range", help="One cycle per octave across a range")
    _add_scale_args(rp)
    rp.add_argument("--start", type=int, default=None)
    rp.add_argument("--end", type=int, default=None)

    dp = sub.add_parser("random", help="Random scale degrees")
    _add_scale_args(dp)
    dp.add_argument("--octave", type=int, default=None)
    dp.add_argument("-n", dest="count", type=int, default=None)
    dp.add_argument("--seed", type=int, default=None)
    dp.add_argument("--backend", choices=BACKENDS, default=None)

    xp = sub.add_parser("name", help="Pitch class for a degree's pattern step")
    _add_scale_args(xp)
    xp.add_argument("--degree", type=int, required=True)

    sp = sub.add_parser("show", help="Print the scale summary")
    _add_scale_args(sp)
    return p


def _scale_from(args: argparse.Namespace, cfg: AppConfig) -> Scale:
    tonic = normalize_name(args.tonic) if args.tonic else cfg.scale.tonic
    pattern = normalize_pattern_name(args.pattern) if args.pattern else cfg.scale.pattern
    return Scale(tonic, pattern)


def _format_pitches(pitches: List[str], with_midi: bool) -> str:
    if not with_midi:
        return " ".join(pitches)
    out = []
    for p in pitches:
        try:
            out.append(f"{p}({pitch_to_midi(p)})")
        except ScaleError:
            out.append(f"{p}(-)")
    return " ".join(out)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    cfg = validate_config(load_config(args.config))
    setup_logging(args.log_level or cfg.logging.level)
    env_seed = seed_if_needed()

    if args.cmd == "patterns":
        for name, steps in SCALE_PATTERNS.items():
            print(f"{name}: {' '.join(str(s) for s in steps)}")
        return 0

    try:
        scale = _scale_from(args, cfg)
    except ScaleError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    logger.info("Using %r", scale)

    if args.cmd == "notes":
        octave = args.octave if args.octave is not None else cfg.scale.octave
        print(_format_pitches(scale.notes(octave, args.count), args.midi))
    elif args.cmd == "range":
        start = args.start if args.start is not None else cfg.range.start_octave
        end = args.end if args.end is not None else cfg.range.end_octave
        print(" ".join(scale.notes_in_range(start, end)))
    elif args.cmd == "random":
        octave = args.octave if args.octave is not None else cfg.scale.octave
        count = args.count if args.count is not None else cfg.random.count
        seed = args.seed if args.seed is not None else cfg.random.seed
        if seed is None:
            seed = env_seed
        source = make_source(seed, args.backend or cfg.random.backend)
        print(" ".join(random_notes(scale, count, octave, source)))
    elif args.cmd == "name":
        print(scale.note_name(args.degree))
    elif args.cmd == "show":
        print(str(scale))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
