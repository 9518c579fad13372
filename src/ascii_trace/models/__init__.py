"""
Data Models
===========

Models for ascii-trace.

Models:
    Document:
        - FrameRecord: One {"content": [...]} record
        - Document: The on-disk frame sequence

    Frame:
        - Frame: Immutable ASCII grid
        - VideoInfo: Probed source video properties

    State:
        - PlayerState: Player lifecycle states
        - PlaybackResult: Outcome of a playback run
"""

from ascii_trace.models.document import Document, FrameRecord
from ascii_trace.models.frame import Frame, VideoInfo
from ascii_trace.models.state import PlaybackResult, PlayerState

__all__ = [
    # Document
    "FrameRecord",
    "Document",
    # Frame
    "Frame",
    "VideoInfo",
    # State
    "PlayerState",
    "PlaybackResult",
]
