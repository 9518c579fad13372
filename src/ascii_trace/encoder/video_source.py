"""
Video Source
============

Probing and frame sampling through OpenCV.

This module:
    - Probes a video for its dimensions, frame rate and frame count
    - Decodes frames sequentially and keeps one every `interval` frames
    - Writes each kept frame as a lossless PNG into a scratch directory
    - Provides scoped scratch directories that are cleaned on every path

Design Rules:
    - Does NOT quantize images (see image_decoder)
    - Always releases the capture handle
"""

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Union

import cv2

from ascii_trace.errors import InputError
from ascii_trace.models.frame import VideoInfo


logger = logging.getLogger(__name__)


DEFAULT_FPS = 30.0
STILL_PATTERN = "frame-{:04d}.png"


def _open_capture(video_path: Union[str, Path]) -> "cv2.VideoCapture":
    """Open a capture, failing with InputError when the file is unusable."""
    path = Path(video_path)
    if not path.exists():
        raise InputError(f"Video file not found at {path}")

    capture = cv2.VideoCapture(str(path))
    if not capture.isOpened():
        capture.release()
        raise InputError(f"Unable to open video: {path}")
    return capture


def probe_video(video_path: Union[str, Path]) -> VideoInfo:
    """
    Read basic properties of a video.

    Args:
        video_path: Source video file

    Returns:
        VideoInfo with width, height, fps, frame_count

    Raises:
        InputError: If the file is missing, unreadable, or has no video stream
    """
    capture = _open_capture(video_path)
    try:
        width = int(capture.get(cv2.CAP_PROP_FRAME_WIDTH))
        height = int(capture.get(cv2.CAP_PROP_FRAME_HEIGHT))
        fps = float(capture.get(cv2.CAP_PROP_FPS))
        frame_count = int(capture.get(cv2.CAP_PROP_FRAME_COUNT))
    finally:
        capture.release()

    if width <= 0 or height <= 0:
        raise InputError(f"No video stream found in {video_path}")

    if fps <= 0:
        fps = DEFAULT_FPS

    return VideoInfo(
        width=width,
        height=height,
        fps=fps,
        frame_count=max(0, frame_count),
    )


def extract_frames(
    video_path: Union[str, Path],
    frame_dir: Union[str, Path],
    interval: int = 1,
    max_frames: Optional[int] = None,
) -> List[Path]:
    """
    Decode a video and save every `interval`-th frame as a PNG.

    Args:
        video_path: Source video file
        frame_dir: Existing directory to write stills into
        interval: Keep source frames whose index is a multiple of this
        max_frames: Stop after this many stills (None = no limit)

    Returns:
        Paths of the written stills, in temporal order

    Raises:
        InputError: If the video cannot be opened or a still cannot be written
    """
    if interval < 1:
        raise ValueError("interval must be >= 1")

    out_dir = Path(frame_dir)
    capture = _open_capture(video_path)
    paths: List[Path] = []
    index = 0

    try:
        while True:
            if max_frames is not None and len(paths) >= max_frames:
                logger.info(f"Reached max_frames={max_frames}, stopping extraction")
                break

            ok, image = capture.read()
            if not ok or image is None:
                break

            if index % interval == 0:
                still_path = out_dir / STILL_PATTERN.format(len(paths) + 1)
                if not cv2.imwrite(str(still_path), image):
                    raise InputError(f"Failed to write extracted frame {still_path}")
                paths.append(still_path)

            index += 1
    finally:
        capture.release()

    logger.info(f"Extracted {len(paths)} frames from {index} decoded")
    return paths


@contextmanager
def scratch_directory(
    frame_dir: Optional[Union[str, Path]] = None,
    cleanup: bool = True,
) -> Iterator[Path]:
    """
    Provide a directory for extracted stills, removed on exit.

    A fresh temporary directory is created when frame_dir is None. A
    frame_dir that already existed is kept; only the stills are removed.

    Args:
        frame_dir: Directory to use, or None for a temporary one
        cleanup: Remove scratch content on exit (success or failure)

    Yields:
        The scratch directory path
    """
    if frame_dir is None:
        path = Path(tempfile.mkdtemp(prefix="ascii-trace-"))
        preexisting = False
    else:
        path = Path(frame_dir)
        preexisting = path.exists()
        path.mkdir(parents=True, exist_ok=True)

    try:
        yield path
    finally:
        if not cleanup:
            logger.info(f"Keeping extracted frames in {path}")
        elif preexisting:
            for still in path.glob("frame-*.png"):
                still.unlink(missing_ok=True)
            logger.info("Cleaned up temporary files")
        else:
            shutil.rmtree(path, ignore_errors=True)
            logger.info("Cleaned up temporary files")
