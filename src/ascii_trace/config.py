"""
ascii-trace Configuration
=========================

This module handles configuration loading for the encoder and the player.

Configuration Sources (in order of precedence):
    1. Command-line flags (applied by the CLI)
    2. Environment variables
    3. config.yaml file
    4. Default values (lowest priority)

Environment Variable Mapping:
    ASCII_TRACE_VIDEO_PATH      -> encoder.video_path
    ASCII_TRACE_OUTPUT_PATH     -> encoder.output_path
    ASCII_TRACE_FRAME_INTERVAL  -> encoder.frame_interval
    ASCII_TRACE_DOCUMENT_PATH   -> player.document_path
    ASCII_TRACE_FPS             -> player.fps
    ASCII_TRACE_LOG_LEVEL       -> logging.level

Example:
    from ascii_trace.config import load_config, setup_logging

    settings = load_config()
    setup_logging(settings)
    print(settings.encoder.width, settings.player.fps)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, model_validator


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class EncoderConfig(BaseModel):
    """Video to Document conversion configuration."""

    video_path: str = Field(
        default="input/bad-apple.mp4",
        description="Source video file",
    )
    output_path: str = Field(
        default="output/bad-apple-ascii.json",
        description="Where the Document is written",
    )
    frame_dir: Optional[str] = Field(
        default=None,
        description="Scratch directory for extracted stills (None = fresh temp dir)",
    )
    width: int = Field(default=80, ge=1, description="Grid width in characters")
    height: int = Field(default=30, ge=1, description="Grid height in characters")
    charset: str = Field(
        default="WM@21ira;:,. ",
        min_length=1,
        description="Palette, darkest to lightest",
    )
    frame_interval: int = Field(
        default=3,
        ge=1,
        description="Keep one source frame every N frames",
    )
    max_frames: Optional[int] = Field(
        default=None,
        ge=1,
        description="Stop after this many sampled frames (None = whole video)",
    )
    channel: str = Field(
        default="red",
        pattern="^(red|luma)$",
        description="Brightness channel: 'red' or 'luma'",
    )
    compress_output: bool = Field(
        default=False,
        description="Write compact JSON instead of indented JSON",
    )
    cleanup: bool = Field(
        default=True,
        description="Remove the scratch directory when done",
    )


class PlayerConfig(BaseModel):
    """Console playback configuration."""

    document_path: str = Field(
        default="output/bad-apple-ascii.json",
        description="Document to replay",
    )
    fps: float = Field(default=30.0, gt=0, description="Target playback rate")
    clear_lines: int = Field(
        default=100,
        ge=0,
        description="Blank lines emitted to clear the console",
    )
    final_clear_repeats: int = Field(
        default=1,
        ge=1,
        description="Console clears after the last frame",
    )
    exception_header: str = Field(
        default='Exception in thread "main" java.lang.NullPointerException',
        description="First line of every rendered trace",
    )
    source_file: str = Field(
        default="HelloWorldMainLauncherClass.java",
        description="File name shown in every fake stack frame",
    )
    line_number_min: int = Field(default=100, ge=0, description="Lowest fake line number")
    line_number_max: int = Field(default=499, ge=0, description="Highest fake line number")
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the line number generator (None = unseeded)",
    )

    @model_validator(mode="after")
    def _check_line_numbers(self) -> "PlayerConfig":
        if self.line_number_max < self.line_number_min:
            raise ValueError("line_number_max must be >= line_number_min")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for ascii-trace.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    encoder: EncoderConfig = Field(default_factory=EncoderConfig)
    player: PlayerConfig = Field(default_factory=PlayerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration

    Raises:
        pydantic.ValidationError: If a value is out of bounds or malformed
        ValueError: If the file or a section is not a mapping
        yaml.YAMLError: If the file is not valid YAML
    """
    # Find config file
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
        if not isinstance(config_data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
        # An empty section ("encoder:") loads as None
        config_data = {k: v for k, v in config_data.items() if v is not None}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _section(config_data: dict, name: str) -> dict:
    """Return a mutable config section, treating an empty YAML section as {}."""
    section = config_data.get(name)
    if section is None:
        section = config_data[name] = {}
    elif not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return section


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Encoder settings
    if env_video := os.environ.get("ASCII_TRACE_VIDEO_PATH"):
        _section(config_data, "encoder")["video_path"] = env_video
    if env_output := os.environ.get("ASCII_TRACE_OUTPUT_PATH"):
        _section(config_data, "encoder")["output_path"] = env_output
    if env_interval := os.environ.get("ASCII_TRACE_FRAME_INTERVAL"):
        _section(config_data, "encoder")["frame_interval"] = env_interval

    # Player settings
    if env_doc := os.environ.get("ASCII_TRACE_DOCUMENT_PATH"):
        _section(config_data, "player")["document_path"] = env_doc
    if env_fps := os.environ.get("ASCII_TRACE_FPS"):
        _section(config_data, "player")["fps"] = env_fps

    # Logging settings
    if env_log := os.environ.get("ASCII_TRACE_LOG_LEVEL"):
        _section(config_data, "logging")["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
