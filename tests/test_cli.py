"""
CLI Tests
=========

Entry points, flag overrides and exit codes.
"""

import json

import numpy as np
import pytest

from ascii_trace.cli import build_encode_parser, build_play_parser, encode_main, play_main


@pytest.fixture
def no_config(tmp_path):
    """Path of a config file that does not exist (defaults only)."""
    return str(tmp_path / "absent.yaml")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "ASCII_TRACE_VIDEO_PATH",
        "ASCII_TRACE_OUTPUT_PATH",
        "ASCII_TRACE_FRAME_INTERVAL",
        "ASCII_TRACE_DOCUMENT_PATH",
        "ASCII_TRACE_FPS",
        "ASCII_TRACE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestParsers:
    """Tests for argument parsing."""

    def test_encode_parser(self):
        args = build_encode_parser().parse_args(
            ["clip.mp4", "-o", "out.json", "--width", "40", "--compress", "--keep-frames"]
        )

        assert args.video == "clip.mp4"
        assert args.output == "out.json"
        assert args.width == 40
        assert args.compress is True
        assert args.keep_frames is True
        assert args.height is None

    def test_play_parser(self):
        args = build_play_parser().parse_args(["doc.json", "--fps", "12.5"])

        assert args.document == "doc.json"
        assert args.fps == 12.5


class TestEncodeMain:
    """Tests for the encoder entry point."""

    def test_success(self, fake_video, tmp_path, no_config):
        path = fake_video([np.zeros((4, 6, 3), dtype=np.uint8)] * 2)
        out = tmp_path / "doc.json"

        code = encode_main([
            str(path),
            "-o", str(out),
            "--config", no_config,
            "--width", "3",
            "--height", "1",
            "--charset", "#. ",
            "--interval", "1",
            "--compress",
        ])

        assert code == 0
        assert json.loads(out.read_text(encoding="utf-8")) == {
            "frames": [{"content": ["   "]}, {"content": ["   "]}]
        }

    def test_missing_video(self, tmp_path, no_config, capsys):
        out = tmp_path / "doc.json"

        code = encode_main([str(tmp_path / "missing.mp4"), "-o", str(out), "--config", no_config])

        assert code == 1
        assert not out.exists()
        assert "not found" in capsys.readouterr().err

    def test_invalid_flag_value(self, tmp_path, no_config):
        code = encode_main([str(tmp_path / "clip.mp4"), "--width", "0", "--config", no_config])

        assert code == 2


class TestPlayMain:
    """Tests for the player entry point."""

    def test_plays_document(self, write_json, no_config, capsys):
        path = write_json({"frames": [{"content": ["abc"]}, {"content": ["def"]}]})

        code = play_main([str(path), "--fps", "240", "--clear-lines", "1", "--config", no_config])

        assert code == 0
        err = capsys.readouterr().err
        assert "\tat abc (HelloWorldMainLauncherClass.java:" in err
        assert "\tat def (HelloWorldMainLauncherClass.java:" in err

    def test_malformed_document(self, write_json, no_config, capsys):
        path = write_json({"frames": "nope"})

        code = play_main([str(path), "--config", no_config])

        assert code == 1
        err = capsys.readouterr().err
        assert "Error loading frames" in err
        assert "Exception in thread" not in err

    def test_missing_document(self, tmp_path, no_config):
        assert play_main([str(tmp_path / "missing.json"), "--config", no_config]) == 1

    def test_invalid_fps(self, write_json, no_config):
        path = write_json({"frames": []})

        assert play_main([str(path), "--fps", "0", "--config", no_config]) == 2


class TestConfigErrors:
    """Configuration problems exit with status 2 instead of a traceback."""

    def test_non_numeric_env_fps(self, write_json, no_config, monkeypatch, capsys):
        path = write_json({"frames": []})
        monkeypatch.setenv("ASCII_TRACE_FPS", "fast")

        assert play_main([str(path), "--config", no_config]) == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_non_numeric_env_interval(self, tmp_path, no_config, monkeypatch):
        monkeypatch.setenv("ASCII_TRACE_FRAME_INTERVAL", "often")

        assert encode_main([str(tmp_path / "clip.mp4"), "--config", no_config]) == 2

    def test_malformed_yaml(self, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text("player: [unclosed\n", encoding="utf-8")

        assert play_main([str(tmp_path / "doc.json"), "--config", str(config)]) == 2
        assert encode_main([str(tmp_path / "clip.mp4"), "--config", str(config)]) == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_non_mapping_yaml(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("just a string\n", encoding="utf-8")

        assert play_main([str(tmp_path / "doc.json"), "--config", str(config)]) == 2

    def test_scalar_section_with_env_override(self, tmp_path, monkeypatch):
        config = tmp_path / "config.yaml"
        config.write_text("encoder: 3\nplayer: 4\n", encoding="utf-8")
        monkeypatch.setenv("ASCII_TRACE_VIDEO_PATH", str(tmp_path / "clip.mp4"))
        monkeypatch.setenv("ASCII_TRACE_DOCUMENT_PATH", str(tmp_path / "doc.json"))

        assert encode_main(["--config", str(config)]) == 2
        assert play_main(["--config", str(config)]) == 2

    def test_empty_section_with_env_override(self, write_json, tmp_path, monkeypatch):
        config = tmp_path / "config.yaml"
        config.write_text("encoder:\nplayer:\n", encoding="utf-8")
        path = write_json({"frames": []})
        monkeypatch.setenv("ASCII_TRACE_VIDEO_PATH", str(tmp_path / "missing.mp4"))
        monkeypatch.setenv("ASCII_TRACE_DOCUMENT_PATH", str(path))

        assert encode_main(["--config", str(config)]) == 1
        assert play_main(["--config", str(config), "--clear-lines", "0"]) == 0
