from dataclasses import dataclass, field
from enum import IntEnum
from typing import Literal, Optional

Category = Literal[
    "sponsor", "intro", "outro", "interaction",
    "selfpromo", "music_offtopic", "preview", "filler",
]

CATEGORIES: tuple[str, ...] = (
    "sponsor", "intro", "outro", "interaction",
    "selfpromo", "music_offtopic", "preview", "filler",
)

VideoID = str
SegmentUUID = str


class VoteType(IntEnum):
    down = 0
    up = 1
    undo = 20


class SortType(IntEnum):
    minutesSaved = 0
    viewCount = 1
    totalSubmissions = 2


@dataclass
class Segment:
    uuid: Optional[SegmentUUID]
    start_time: float
    end_time: float
    category: str
    video_duration: Optional[float] = None


@dataclass
class LocalSegment:
    start_time: float
    end_time: float
    category: str


@dataclass
class Video:
    video_id: VideoID
    hash: str
    segments: list[Segment] = field(default_factory=list)


@dataclass
class LockedVideo:
    video_id: VideoID
    hash: str
    categories: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UserStat:
    user_name: str
    view_count: int
    total_submissions: int
    minutes_saved: float


@dataclass(frozen=True)
class OverallStats:
    user_count: int
    view_count: int
    total_submissions: int
    minutes_saved: float


@dataclass(frozen=True)
class SegmentInfo:
    video_id: VideoID
    start_time: float
    end_time: float
    votes: int
    locked: bool
    uuid: SegmentUUID
    user_id: str
    time_submitted: int
    views: int
    category: str
    service: str
    video_duration: float
    hidden: bool
    reputation: float
    shadow_hidden: bool


@dataclass(frozen=True)
class UserIDPair:
    user_name: str
    user_id: str
