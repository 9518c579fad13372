"""
Frame Encoder
=============

Converts a video into a Document of ASCII frames.

Pipeline (strictly sequential):
    1. Probe the video (fails fast on missing / unreadable / no stream)
    2. Extract every N-th frame as a still into a scratch directory
    3. Quantize each still to a width x height grid of palette characters
    4. Write the Document atomically

The scratch directory is removed on both the success and the failure
path. A failed conversion never leaves a partial Document behind.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import numpy as np

from ascii_trace.config import EncoderConfig
from ascii_trace.encoder.image_decoder import CHANNELS, image_to_rows, load_still
from ascii_trace.encoder.palette import build_lookup
from ascii_trace.encoder.video_source import extract_frames, probe_video, scratch_directory
from ascii_trace.models.document import Document, FrameRecord
from ascii_trace.models.frame import Frame


logger = logging.getLogger(__name__)


class FrameEncoder:
    """
    Encoder from images and videos to ASCII frames.

    Attributes:
        width: Grid width in characters
        height: Grid height in characters
        charset: Palette, darkest to lightest
        channel: Brightness channel ('red' or 'luma')

    Example:
        encoder = FrameEncoder(width=80, height=30, charset="WM@21ira;:,. ")
        document = encoder.encode_video("input/bad-apple.mp4", frame_interval=3)
    """

    def __init__(
        self,
        width: int = 80,
        height: int = 30,
        charset: str = "WM@21ira;:,. ",
        channel: str = "red",
        log_every_n_frames: int = 10,
    ) -> None:
        """
        Initialize frame encoder.

        Args:
            width: Grid width in characters (>= 1)
            height: Grid height in characters (>= 1)
            charset: Palette from darkest to lightest (non-empty)
            channel: Brightness channel to read
            log_every_n_frames: Log conversion progress every N frames
        """
        if width < 1 or height < 1:
            raise ValueError("width and height must be >= 1")
        if not charset:
            raise ValueError("charset must not be empty")
        if channel not in CHANNELS:
            raise ValueError(f"channel must be one of {CHANNELS}")

        self.width = width
        self.height = height
        self.charset = charset
        self.channel = channel
        self.log_every_n_frames = max(1, log_every_n_frames)
        self._lookup = build_lookup(charset)

        logger.info(
            f"FrameEncoder initialized: {width}x{height} characters, "
            f'charset (dark to light)="{charset}", channel={channel}'
        )

    @classmethod
    def from_config(cls, config: EncoderConfig) -> "FrameEncoder":
        """Build an encoder from the encoder section of the settings."""
        return cls(
            width=config.width,
            height=config.height,
            charset=config.charset,
            channel=config.channel,
        )

    def encode_image(self, image: np.ndarray) -> Frame:
        """
        Quantize one image into a Frame.

        Args:
            image: BGR or single-channel uint8 image at any resolution

        Returns:
            Frame with `height` rows of `width` characters
        """
        rows = image_to_rows(
            image,
            self.width,
            self.height,
            self.charset,
            channel=self.channel,
            lookup=self._lookup,
        )
        return Frame(rows=tuple(rows))

    def encode_still(self, path: Union[str, Path]) -> Frame:
        """Read a still from disk and quantize it."""
        return self.encode_image(load_still(path))

    def encode_video(
        self,
        video_path: Union[str, Path],
        frame_interval: int = 1,
        max_frames: Optional[int] = None,
        frame_dir: Optional[Union[str, Path]] = None,
        cleanup: bool = True,
    ) -> Document:
        """
        Convert a video into a Document.

        Args:
            video_path: Source video file
            frame_interval: Keep one source frame every N frames
            max_frames: Stop after this many sampled frames
            frame_dir: Scratch directory (None = fresh temp dir)
            cleanup: Remove extracted stills when done

        Returns:
            Document with one record per sampled frame, in temporal order

        Raises:
            InputError: If the video is missing, unreadable, or has no video stream
        """
        info = probe_video(video_path)
        logger.info(f"Video info: {info!r}")
        logger.info(
            f"Total frames: ~{info.frame_count}, "
            f"extracting 1 frame every {frame_interval} frames"
        )

        document = Document()

        with scratch_directory(frame_dir, cleanup=cleanup) as scratch:
            still_paths = extract_frames(
                video_path,
                scratch,
                interval=frame_interval,
                max_frames=max_frames,
            )

            total = len(still_paths)
            logger.info("Converting frames to ASCII...")

            for i, still_path in enumerate(still_paths):
                frame = self.encode_still(still_path)
                document.frames.append(FrameRecord(content=list(frame.rows)))

                if i % self.log_every_n_frames == 0 or i == total - 1:
                    logger.info(f"Converting: {(i + 1) * 100 // total}% ({i + 1}/{total})")

        logger.info(f"Converted {len(document.frames)} frames to ASCII")
        return document


def write_document(
    document: Document,
    output_path: Union[str, Path],
    compact: bool = False,
) -> Path:
    """
    Persist a Document atomically.

    Writes to a sibling temp file first and renames it over the target,
    so readers never observe a partial Document.

    Args:
        document: Document to write
        output_path: Destination file
        compact: No whitespace when True, 2-space indent otherwise

    Returns:
        The destination path
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(path.name + ".tmp")

    try:
        temp_path.write_text(document.to_json(compact=compact), encoding="utf-8")
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise

    kind = "compressed ASCII data" if compact else "ASCII data"
    logger.info(f"Saved {kind} to {path}")
    return path


def convert(config: EncoderConfig) -> Path:
    """
    Run a full conversion from the encoder settings.

    Args:
        config: Encoder section of the settings

    Returns:
        Path of the written Document
    """
    logger.info("Starting video to inverted ASCII conversion")
    logger.info(
        f"Settings: {config.width}x{config.height} characters, "
        f"interval: {config.frame_interval}"
    )

    encoder = FrameEncoder.from_config(config)
    document = encoder.encode_video(
        config.video_path,
        frame_interval=config.frame_interval,
        max_frames=config.max_frames,
        frame_dir=config.frame_dir,
        cleanup=config.cleanup,
    )
    path = write_document(document, config.output_path, compact=config.compress_output)

    logger.info("Conversion complete!")
    return path
