"""
Player State Models
===================

Lifecycle of a FramePlayer:

    NOT_LOADED → LOADED → PLAYING → FINISHED

Linear, no branching, no recovery transitions. A failed load leaves the
player in NOT_LOADED.
"""

from dataclasses import dataclass
from enum import Enum


class PlayerState(str, Enum):
    """
    Discrete playback states.

    Attributes:
        NOT_LOADED: No Document parsed yet (or the load failed)
        LOADED: Frames in memory, playback not started
        PLAYING: Frame loop running
        FINISHED: Loop ended (completed or interrupted)
    """

    NOT_LOADED = "NOT_LOADED"
    LOADED = "LOADED"
    PLAYING = "PLAYING"
    FINISHED = "FINISHED"


@dataclass(frozen=True, slots=True)
class PlaybackResult:
    """
    Outcome of one playback run.

    Attributes:
        frames_rendered: Frames actually written to the console
        interrupted: True when playback stopped early
    """

    frames_rendered: int
    interrupted: bool

    def to_dict(self) -> dict:
        """Export as dictionary for logging."""
        return {
            "frames_rendered": self.frames_rendered,
            "interrupted": self.interrupted,
        }
