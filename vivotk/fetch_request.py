"""Requests passed between the renderer, the buffer manager and the fetcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from vivotk.camera_trace import CameraPosition

__all__ = ["FrameRequest", "PCMetadata", "FetchRequest"]


@dataclass
class FrameRequest:
    """A renderer's request for one frame of an object."""

    object_id: int
    frame_offset: int
    camera_pos: Optional[CameraPosition] = None


@dataclass
class PCMetadata:
    """Identifies a decoded point cloud."""

    object_id: int
    frame_offset: int


@dataclass
class FetchRequest:
    """A frame request together with the buffer occupancy when it was issued.

    ``frame_offset`` counts frames from the start of the video.
    """

    object_id: int
    frame_offset: int
    camera_pos: Optional[CameraPosition]
    buffer_occupancy: int

    @classmethod
    def from_frame_request(cls, req: FrameRequest, buffer_occupancy: int) -> "FetchRequest":
        return cls(req.object_id, req.frame_offset, req.camera_pos, buffer_occupancy)

    def to_metadata(self) -> PCMetadata:
        return PCMetadata(self.object_id, self.frame_offset)

    def to_frame_request(self) -> FrameRequest:
        return FrameRequest(self.object_id, self.frame_offset, self.camera_pos)