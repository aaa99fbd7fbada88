"""JSON shapes as the service sends them, and conversions to the client types.

Models here keep the service's own field names so they can validate a body
as-is. Everything outside this module works with `sponsorblock.types`.
"""
from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter

from sponsorblock import types as t, util


JSON_BODY = TypeAdapter(Any)
BUCKET = TypeAdapter(list[dict[str, Any]])


class WireSegment(BaseModel):
    UUID: Optional[str] = None
    segment: tuple[float, float]
    category: str
    videoDuration: Optional[float] = None


class WireVideo(BaseModel):
    videoID: str
    hash: str
    segments: list[WireSegment] = []


class WireLockedVideo(BaseModel):
    videoID: str
    hash: str
    categories: list[str] = []


class WireTopUsers(BaseModel):
    userNames: list[str]
    viewCounts: list[int]
    totalSubmissions: list[int]
    minutesSaved: list[float]


class WireOverallStats(BaseModel):
    userCount: int
    viewCount: int
    totalSubmissions: int
    minutesSaved: float


class WireSegmentInfo(BaseModel):
    videoID: str
    startTime: float
    endTime: float
    votes: int = 0
    locked: int = 0
    UUID: str
    userID: str = ""
    timeSubmitted: int = 0
    views: int = 0
    category: str
    service: str = ""
    videoDuration: float = 0.0
    hidden: int = 0
    reputation: float = 0.0
    shadowHidden: int = 0


class WireUserIDPair(BaseModel):
    userName: str
    userID: str


def segment_from_wire(data: util.Json | WireSegment) -> t.Segment:
    wire = data if isinstance(data, WireSegment) else WireSegment.model_validate(data)
    start, end = wire.segment
    return t.Segment(
        uuid=wire.UUID,
        start_time=start,
        end_time=end,
        category=wire.category,
        video_duration=wire.videoDuration,
    )


def segment_to_wire(segment: t.Segment) -> dict[str, Any]:
    wire: dict[str, Any] = {}
    if segment.uuid is not None:
        wire["UUID"] = segment.uuid
    wire["segment"] = [segment.start_time, segment.end_time]
    wire["category"] = segment.category
    if segment.video_duration is not None:
        wire["videoDuration"] = segment.video_duration
    return wire


def local_segment_to_wire(segment: t.LocalSegment | t.Segment) -> dict[str, Any]:
    return {"segment": [segment.start_time, segment.end_time], "category": segment.category}


def segments_from_wire(data: util.Json) -> list[t.Segment]:
    return [segment_from_wire(s) for s in data]


def video_from_wire(data: util.Json | WireVideo) -> t.Video:
    wire = data if isinstance(data, WireVideo) else WireVideo.model_validate(data)
    return t.Video(
        video_id=wire.videoID,
        hash=wire.hash,
        segments=[segment_from_wire(s) for s in wire.segments],
    )


def locked_video_from_wire(data: util.Json | WireLockedVideo) -> t.LockedVideo:
    wire = data if isinstance(data, WireLockedVideo) else WireLockedVideo.model_validate(data)
    return t.LockedVideo(video_id=wire.videoID, hash=wire.hash, categories=list(wire.categories))


def user_stats_from_columns(data: util.Json | WireTopUsers) -> list[t.UserStat]:
    wire = data if isinstance(data, WireTopUsers) else WireTopUsers.model_validate(data)
    columns = (wire.userNames, wire.viewCounts, wire.totalSubmissions, wire.minutesSaved)
    if len({len(c) for c in columns}) > 1:
        raise ValueError("top users columns have different lengths")
    return [
        t.UserStat(user_name=name, view_count=views, total_submissions=submissions, minutes_saved=minutes)
        for name, views, submissions, minutes in zip(*columns)
    ]


def user_stats_to_columns(stats: list[t.UserStat]) -> dict[str, list]:
    return {
        "userNames": [s.user_name for s in stats],
        "viewCounts": [s.view_count for s in stats],
        "totalSubmissions": [s.total_submissions for s in stats],
        "minutesSaved": [s.minutes_saved for s in stats],
    }


def overall_stats_from_wire(data: util.Json) -> t.OverallStats:
    wire = WireOverallStats.model_validate(data)
    return t.OverallStats(
        user_count=wire.userCount,
        view_count=wire.viewCount,
        total_submissions=wire.totalSubmissions,
        minutes_saved=wire.minutesSaved,
    )


def segment_info_from_wire(data: util.Json) -> t.SegmentInfo:
    wire = WireSegmentInfo.model_validate(data)
    return t.SegmentInfo(
        video_id=wire.videoID,
        start_time=wire.startTime,
        end_time=wire.endTime,
        votes=wire.votes,
        locked=bool(wire.locked),
        uuid=wire.UUID,
        user_id=wire.userID,
        time_submitted=wire.timeSubmitted,
        views=wire.views,
        category=wire.category,
        service=wire.service,
        video_duration=wire.videoDuration,
        hidden=bool(wire.hidden),
        reputation=wire.reputation,
        shadow_hidden=bool(wire.shadowHidden),
    )


def user_id_pair_from_wire(data: util.Json) -> t.UserIDPair:
    wire = WireUserIDPair.model_validate(data)
    return t.UserIDPair(user_name=wire.userName, user_id=wire.userID)
