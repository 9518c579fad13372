"""
Test Configuration
==================

Pytest fixtures and test configuration for ascii-trace.
"""

import json

import cv2
import pytest


class FakeCapture:
    """Stand-in for cv2.VideoCapture serving in-memory frames."""

    def __init__(self, frames, fps=30.0, opened=True, width=None, height=None):
        self._frames = list(frames)
        self._pos = 0
        self._opened = opened
        self._fps = fps
        if width is None:
            width = self._frames[0].shape[1] if self._frames else 64
        if height is None:
            height = self._frames[0].shape[0] if self._frames else 48
        self._width = width
        self._height = height
        self.released = False

    def isOpened(self):
        return self._opened

    def get(self, prop):
        if prop == cv2.CAP_PROP_FRAME_WIDTH:
            return float(self._width)
        if prop == cv2.CAP_PROP_FRAME_HEIGHT:
            return float(self._height)
        if prop == cv2.CAP_PROP_FPS:
            return float(self._fps)
        if prop == cv2.CAP_PROP_FRAME_COUNT:
            return float(len(self._frames))
        return 0.0

    def read(self):
        if self._pos >= len(self._frames):
            return False, None
        frame = self._frames[self._pos]
        self._pos += 1
        return True, frame.copy()

    def release(self):
        self.released = True


@pytest.fixture
def fake_video(tmp_path, monkeypatch):
    """
    Install a fake OpenCV capture and return a factory.

    Calling the factory with a list of frames returns the path of a
    placeholder video file whose captures serve those frames.
    """
    from ascii_trace.encoder import video_source

    captures = []

    def install(frames, name="clip.mp4", **kwargs):
        path = tmp_path / name
        path.write_bytes(b"not really a video")

        def factory(*args, **_):
            capture = FakeCapture(frames, **kwargs)
            captures.append(capture)
            return capture

        monkeypatch.setattr(video_source.cv2, "VideoCapture", factory)
        return path

    install.captures = captures
    return install


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON payload to a file and return its path."""

    def write(payload, name="doc.json"):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return write


@pytest.fixture
def sample_document():
    """Provide a small well-formed Document payload."""
    return {
        "frames": [
            {"content": ["WM@", "21i"]},
            {"content": ["ra;", ":,."]},
            {"content": ["   ", "WWW"]},
        ]
    }
