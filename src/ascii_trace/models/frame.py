"""
Frame Data Models
=================

Internal representations passed between pipeline stages.

    - Frame: one ASCII grid, the unit the player renders
    - VideoInfo: probed properties of a source video
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Frame:
    """
    One still image's worth of ASCII grid output.

    It is immutable (frozen) once produced.

    Attributes:
        rows: Row strings, top to bottom
    """

    rows: Tuple[str, ...]

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the full grid."""
        width = len(self.rows[0]) if self.rows else 0
        return f"Frame(rows={self.height}, width={width})"


@dataclass(frozen=True, slots=True)
class VideoInfo:
    """
    Properties of a source video.

    Attributes:
        width: Native frame width in pixels
        height: Native frame height in pixels
        fps: Declared frame rate
        frame_count: Declared number of frames (may be approximate)
    """

    width: int
    height: int
    fps: float
    frame_count: int

    @property
    def duration(self) -> float:
        """Duration in seconds derived from frame count and fps."""
        if self.fps <= 0:
            return 0.0
        return self.frame_count / self.fps

    def __repr__(self) -> str:
        return (
            f"VideoInfo({self.width}x{self.height}, "
            f"{self.duration:.2f}s, {self.fps:.2f} fps)"
        )
