"""
Trace Renderer
==============

Writes frames to the console disguised as a Java exception stack trace:

    Exception in thread "main" java.lang.NullPointerException
    	at <row 1> (HelloWorldMainLauncherClass.java:217)
    	at <row 2> (HelloWorldMainLauncherClass.java:402)
    	...

The line numbers are random and purely cosmetic. Each renderer owns its
own random source; nothing depends on the sequence it produces.
"""

import random
import sys
from typing import Optional, TextIO

from ascii_trace.config import PlayerConfig
from ascii_trace.models.frame import Frame


DEFAULT_HEADER = 'Exception in thread "main" java.lang.NullPointerException'
DEFAULT_SOURCE_FILE = "HelloWorldMainLauncherClass.java"


class TraceRenderer:
    """
    Console renderer for frames.

    Attributes:
        stream: Text stream written to (stderr by default)
        clear_lines: Blank lines emitted per clear
        header: First line of every trace
        source_file: File name in every fake stack frame
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        clear_lines: int = 100,
        header: str = DEFAULT_HEADER,
        source_file: str = DEFAULT_SOURCE_FILE,
        line_number_min: int = 100,
        line_number_max: int = 499,
        rng: Optional[random.Random] = None,
    ) -> None:
        if clear_lines < 0:
            raise ValueError("clear_lines must be >= 0")
        if line_number_max < line_number_min:
            raise ValueError("line_number_max must be >= line_number_min")

        self.stream = stream if stream is not None else sys.stderr
        self.clear_lines = clear_lines
        self.header = header
        self.source_file = source_file
        self.line_number_min = line_number_min
        self.line_number_max = line_number_max
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_config(
        cls,
        config: PlayerConfig,
        stream: Optional[TextIO] = None,
    ) -> "TraceRenderer":
        """Build a renderer from the player section of the settings."""
        return cls(
            stream=stream,
            clear_lines=config.clear_lines,
            header=config.exception_header,
            source_file=config.source_file,
            line_number_min=config.line_number_min,
            line_number_max=config.line_number_max,
            rng=random.Random(config.seed),
        )

    def clear(self) -> None:
        """Push prior console content out of view."""
        self.stream.write("\n" * self.clear_lines)
        self.stream.flush()

    def format_frame(self, frame: Frame) -> str:
        """Build the full trace text for one frame."""
        lines = [self.header]
        for row in frame.rows:
            line_number = self._rng.randint(self.line_number_min, self.line_number_max)
            lines.append(f"\tat {row} ({self.source_file}:{line_number})")
        return "\n".join(lines) + "\n"

    def render(self, frame: Frame) -> None:
        """Clear the console and print the frame in a single write."""
        output = self.format_frame(frame)
        self.clear()
        self.stream.write(output)
        self.stream.flush()
