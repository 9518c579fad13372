"""
Player Module
=============

Document to console playback.

This module provides the player side of the pipeline:
    - load_document / parse_document: Lenient Document parsing
    - TraceRenderer: Frame as fake Java stack trace
    - FramePlayer: Fixed-rate playback state machine

Example:
    from ascii_trace.player import FramePlayer, TraceRenderer

    player = FramePlayer(TraceRenderer(), fps=30)
    player.load("output/bad-apple-ascii.json")
    player.play()
"""

from ascii_trace.player.loader import load_document, parse_document
from ascii_trace.player.renderer import TraceRenderer
from ascii_trace.player.playback import FramePlayer


__all__ = [
    "load_document",
    "parse_document",
    "TraceRenderer",
    "FramePlayer",
]
