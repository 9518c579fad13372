"""
Frame Player
============

Fixed-rate console playback of a loaded Document.

Loop per frame:
    1. start = now
    2. render the frame
    3. sleep max(0, 1/fps - (now - start))

The sleep self-corrects for rendering latency and is never negative.
After the last frame the console is cleared. A keyboard interrupt ends
playback early; it is reported and is not an error.
"""

import logging
import time
from pathlib import Path
from typing import Callable, List, Union

from ascii_trace.models.frame import Frame
from ascii_trace.models.state import PlaybackResult, PlayerState
from ascii_trace.player.loader import load_document
from ascii_trace.player.renderer import TraceRenderer


logger = logging.getLogger(__name__)


class FramePlayer:
    """
    Sequential, single-threaded frame player.

    State machine (linear):
        NOT_LOADED → LOADED → PLAYING → FINISHED

    Attributes:
        fps: Target playback rate
        state: Current lifecycle state
        frames: Loaded frames (empty until load succeeds)

    Example:
        player = FramePlayer(TraceRenderer(), fps=30)
        player.load("output/bad-apple-ascii.json")
        result = player.play()
    """

    def __init__(
        self,
        renderer: TraceRenderer,
        fps: float = 30.0,
        final_clear_repeats: int = 1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize frame player.

        Args:
            renderer: Console renderer
            fps: Target playback rate (> 0)
            final_clear_repeats: Console clears after the last frame (>= 1)
            clock: Monotonic time source in seconds
            sleep: Sleep function in seconds
        """
        if fps <= 0:
            raise ValueError("fps must be positive")
        if final_clear_repeats < 1:
            raise ValueError("final_clear_repeats must be >= 1")

        self.fps = fps
        self.final_clear_repeats = final_clear_repeats
        self._renderer = renderer
        self._clock = clock
        self._sleep = sleep
        self._frames: List[Frame] = []
        self._state = PlayerState.NOT_LOADED

    @property
    def state(self) -> PlayerState:
        """Current lifecycle state."""
        return self._state

    @property
    def frames(self) -> List[Frame]:
        """Loaded frames in display order."""
        return list(self._frames)

    @property
    def frame_delay(self) -> float:
        """Target spacing between frame starts, in seconds."""
        return 1.0 / self.fps

    def load(self, path: Union[str, Path]) -> int:
        """
        Load a Document.

        Args:
            path: Document file

        Returns:
            Number of renderable frames

        Raises:
            InputError: If the file is missing or unreadable
            FormatError: If the Document is misshapen
        """
        if self._state is not PlayerState.NOT_LOADED:
            raise RuntimeError(f"Cannot load from state {self._state.value}")

        # Stays NOT_LOADED if this raises
        self._frames = load_document(path)
        self._state = PlayerState.LOADED
        return len(self._frames)

    def play(self) -> PlaybackResult:
        """
        Play all loaded frames once.

        Returns:
            PlaybackResult with rendered count and interrupt flag
        """
        if self._state is not PlayerState.LOADED:
            raise RuntimeError(f"Cannot play from state {self._state.value}")

        self._state = PlayerState.PLAYING
        total = len(self._frames)
        rendered = 0
        interrupted = False

        if total == 0:
            logger.warning("No frames to play")
        else:
            logger.info(f"Playing {total} frames at {self.fps:g} fps")

        try:
            for frame in self._frames:
                start = self._clock()
                self._renderer.render(frame)
                rendered += 1

                elapsed = self._clock() - start
                remaining = self.frame_delay - elapsed
                if remaining > 0:
                    self._sleep(remaining)

            for _ in range(self.final_clear_repeats):
                self._renderer.clear()
        except KeyboardInterrupt:
            interrupted = True
            logger.warning(f"Playback stopped early after {rendered}/{total} frames")

        self._state = PlayerState.FINISHED
        return PlaybackResult(frames_rendered=rendered, interrupted=interrupted)
