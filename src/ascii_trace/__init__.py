"""
ascii-trace
===========

Play videos in a console, disguised as Java exception stack traces.

Two independent components, connected only by a JSON Document on disk:
    - encoder: samples a video, quantizes frames to ASCII, writes the Document
    - player: loads the Document and replays it at a fixed rate

Example:
    $ ascii-trace-encode input/bad-apple.mp4 -o output/bad-apple-ascii.json
    $ ascii-trace-play output/bad-apple-ascii.json --fps 30
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
