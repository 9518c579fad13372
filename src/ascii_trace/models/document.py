"""
Document Schema
===============

Pydantic models for the on-disk JSON artifact shared by encoder and player.

Document Contract:
    {
        "frames": [
            {"content": ["row 1", "row 2", ...]},
            ...
        ]
    }

Guarantees (from the encoder):
    - frames are in display order
    - every content list has the configured row count
    - every row has the configured column count

No metadata (dimensions, palette, frame rate) is embedded. Encoder and
player agree on those out of band.

The player does NOT validate through these models: it parses leniently and
skips malformed records (see ascii_trace.player.loader).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class FrameRecord(BaseModel):
    """
    One frame of the Document.

    Attributes:
        content: Row strings, top to bottom
    """

    content: List[str] = Field(
        default_factory=list,
        description="Row strings of one frame, top to bottom",
    )


class Document(BaseModel):
    """
    Complete ordered frame sequence produced by the encoder.

    Attributes:
        frames: Frame records in display order
    """

    frames: List[FrameRecord] = Field(
        default_factory=list,
        description="Frame records in display order",
    )

    def to_json(self, compact: bool = False) -> str:
        """
        Serialize the Document.

        Args:
            compact: No whitespace when True, 2-space indent otherwise

        Returns:
            JSON text
        """
        if compact:
            return self.model_dump_json()
        return self.model_dump_json(indent=2)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "frames": [
                    {"content": ["WM@21", "ira;:"]},
                    {"content": [",. WM", "@21ir"]},
                ]
            }
        }
    )
