"""
Command-Line Interface
======================

Two independent entry points:

    ascii-trace-encode  video -> Document
    ascii-trace-play    Document -> console

Each one loads settings (config.yaml + environment), applies its flags on
top, and imports only its own component.

Exit codes:
    0  success (including playback stopped early)
    1  input or format error
    2  invalid configuration (bad value, malformed YAML or environment)
"""

import argparse
import logging
import sys
from typing import Iterable, Optional

import yaml

from ascii_trace.config import EncoderConfig, PlayerConfig, Settings, load_config, setup_logging
from ascii_trace.errors import AsciiTraceError


logger = logging.getLogger(__name__)


def build_encode_parser() -> argparse.ArgumentParser:
    """Build and return the encoder argument parser."""
    parser = argparse.ArgumentParser(
        prog="ascii-trace-encode",
        description="Convert a video into an ASCII frame Document",
    )
    parser.add_argument("video", nargs="?", default=None, help="Source video file")
    parser.add_argument("-o", "--output", default=None, help="Document output path")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--width", type=int, default=None, help="Grid width in characters")
    parser.add_argument("--height", type=int, default=None, help="Grid height in characters")
    parser.add_argument("--charset", default=None, help="Palette, darkest to lightest")
    parser.add_argument(
        "--interval",
        type=int,
        default=None,
        help="Keep one source frame every N frames",
    )
    parser.add_argument("--max-frames", type=int, default=None, help="Stop after N frames")
    parser.add_argument(
        "--channel",
        choices=["red", "luma"],
        default=None,
        help="Brightness channel",
    )
    parser.add_argument("--frame-dir", default=None, help="Scratch directory for stills")
    parser.add_argument(
        "--compress",
        action="store_true",
        default=None,
        help="Write compact JSON",
    )
    parser.add_argument(
        "--keep-frames",
        action="store_true",
        help="Do not remove extracted stills",
    )
    return parser


def build_play_parser() -> argparse.ArgumentParser:
    """Build and return the player argument parser."""
    parser = argparse.ArgumentParser(
        prog="ascii-trace-play",
        description="Replay an ASCII frame Document as stack traces",
    )
    parser.add_argument("document", nargs="?", default=None, help="Document to play")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--fps", type=float, default=None, help="Target playback rate")
    parser.add_argument("--seed", type=int, default=None, help="Line number seed")
    parser.add_argument(
        "--clear-lines",
        type=int,
        default=None,
        help="Blank lines used to clear the console",
    )
    return parser


def _load_settings(config_path: Optional[str]) -> Settings:
    settings = load_config(config_path)
    setup_logging(settings)
    return settings


def _with_overrides(section, overrides: dict):
    """Re-validate a settings section with non-None overrides applied."""
    data = section.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return type(section).model_validate(data)


def encode_main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the encoder."""
    parser = build_encode_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = _load_settings(args.config)
        config: EncoderConfig = _with_overrides(
            settings.encoder,
            {
                "video_path": args.video,
                "output_path": args.output,
                "width": args.width,
                "height": args.height,
                "charset": args.charset,
                "frame_interval": args.interval,
                "max_frames": args.max_frames,
                "channel": args.channel,
                "frame_dir": args.frame_dir,
                "compress_output": args.compress,
                "cleanup": False if args.keep_frames else None,
            },
        )
    except (ValueError, yaml.YAMLError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    from ascii_trace.encoder import convert

    try:
        convert(config)
    except (AsciiTraceError, OSError) as exc:
        logger.error(f"Conversion failed: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def play_main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the player."""
    parser = build_play_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = _load_settings(args.config)
        config: PlayerConfig = _with_overrides(
            settings.player,
            {
                "document_path": args.document,
                "fps": args.fps,
                "seed": args.seed,
                "clear_lines": args.clear_lines,
            },
        )
    except (ValueError, yaml.YAMLError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    from ascii_trace.player import FramePlayer, TraceRenderer

    player = FramePlayer(
        TraceRenderer.from_config(config),
        fps=config.fps,
        final_clear_repeats=config.final_clear_repeats,
    )

    try:
        player.load(config.document_path)
    except AsciiTraceError as exc:
        logger.error(f"Error loading frames: {exc}")
        print(f"Error loading frames: {exc}", file=sys.stderr)
        return 1

    result = player.play()
    logger.info(f"Playback finished: {result.to_dict()}")
    return 0
