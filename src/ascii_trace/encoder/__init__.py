"""
Encoder Module
==============

Video to Document conversion.

This module provides the converter side of the pipeline:
    - palette_index / build_lookup: Brightness to character mapping
    - image_to_rows: Quantize one image into palette rows
    - probe_video / extract_frames: OpenCV frame sampling
    - FrameEncoder: Image and video to Frame / Document
    - write_document / convert: Atomic Document output

Example:
    from ascii_trace.config import EncoderConfig
    from ascii_trace.encoder import convert

    path = convert(EncoderConfig(video_path="clip.mp4", output_path="clip.json"))
"""

from ascii_trace.encoder.palette import build_lookup, palette_index
from ascii_trace.encoder.image_decoder import extract_channel, image_to_rows, load_still
from ascii_trace.encoder.video_source import extract_frames, probe_video, scratch_directory
from ascii_trace.encoder.converter import FrameEncoder, convert, write_document


__all__ = [
    "palette_index",
    "build_lookup",
    "extract_channel",
    "image_to_rows",
    "load_still",
    "probe_video",
    "extract_frames",
    "scratch_directory",
    "FrameEncoder",
    "write_document",
    "convert",
]
