import logging
from enum import IntEnum
from typing import Any, Iterable, Optional, Sequence, Union

import httpx

from sponsorblock import hashing, lookup, types as t, util, wire
from sponsorblock.options import DEFAULT_OPTIONS, Options
from sponsorblock.transport import Requester

logger = logging.getLogger(__name__)


def _enum_value(enum_cls: type[IntEnum], value: Union[IntEnum, str, int]) -> int:
    if isinstance(value, enum_cls):
        return int(value)
    if isinstance(value, str):
        try:
            return int(enum_cls[value])
        except KeyError:
            raise ValueError(f"Unknown {enum_cls.__name__} {value!r}") from None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise ValueError(f"Unknown {enum_cls.__name__} {value!r}")


def _category_list(categories: Optional[Iterable[str]]) -> Optional[list[str]]:
    if not categories:
        return None
    if isinstance(categories, str):
        return [categories]
    return list(categories)


def _video_id(video: util.VideoResolvable) -> str:
    return util.require_id(util.resolve_video(video), "video")


def _segment_uuid(segment: util.SegmentResolvable) -> str:
    return util.require_id(util.resolve_segment(segment), "segment")


class VIPActions:
    """Moderation calls. The service decides who may use them."""

    def __init__(self, requester: Requester):
        self._r = requester

    async def block_submissions_of_category(self, video: util.VideoResolvable, *categories: str):
        await self._r.post("/api/noSegments", body={
            "videoID": _video_id(video),
            "userID": self._r.user_id,
            "categories": list(categories),
        })

    async def shadow_ban(self, public_user_id: str, enabled: bool = True, unhide_old_submissions: bool = False):
        await self._r.post("/api/shadowBanUser", params={
            "userID": public_user_id,
            "adminUserID": self._r.user_id,
            "enabled": enabled,
            "unHideOldSubmissions": unhide_old_submissions,
        })

    async def remove_shadow_ban(self, public_user_id: str):
        await self.shadow_ban(public_user_id, enabled=False)

    async def hide_old_submissions(self, public_user_id: str):
        await self.shadow_ban(public_user_id, enabled=True, unhide_old_submissions=True)

    async def warn_user(self, public_user_id: str, reason: str = "", enabled: bool = True):
        await self._r.post("/api/warnUser", body={
            "issuerUserID": self._r.user_id,
            "userID": public_user_id,
            "enabled": enabled,
            "reason": reason,
        })

    async def clear_cache(self, video: util.VideoResolvable):
        await self._r.get("/api/clearCache", params={"videoID": _video_id(video), "userID": self._r.user_id})

    async def purge_all_segments(self, video: util.VideoResolvable):
        await self._r.get("/api/purgeAllSegments", params={"videoID": _video_id(video), "userID": self._r.user_id})


class AdminActions:

    def __init__(self, requester: Requester):
        self._r = requester

    async def add_vip(self, public_user_id: str, enabled: bool = True):
        await self._r.get("/api/addUserAsVIP", params={
            "userID": public_user_id,
            "adminUserID": self._r.user_id,
            "enabled": enabled,
        })


class SponsorBlock:
    """Client for one local user id.

    Privileged calls live on `vip` and `admin`; they share this client's
    connection and user id.
    """

    def __init__(self, user_id: str, options: Optional[Options] = None, http: Optional[httpx.AsyncClient] = None):
        if not user_id:
            raise ValueError("user_id is required")
        self.user_id = user_id
        self.options = options or DEFAULT_OPTIONS
        self._r = Requester(user_id, self.options, http)
        self._hashed_user_id: Optional[str] = None
        self.vip = VIPActions(self._r)
        self.admin = AdminActions(self._r)

    async def __aenter__(self) -> "SponsorBlock":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._r.aclose()

    def _segment_params(self, categories: Optional[Iterable[str]], required_segments: Sequence[str]) -> dict[str, Any]:
        return {
            "service": self.options.service,
            "categories": _category_list(categories),
            "requiredSegments": list(required_segments) if required_segments else None,
        }

    async def get_segments(
        self,
        video: util.VideoResolvable,
        categories: Optional[Iterable[str]] = None,
        *required_segments: str,
    ) -> list[t.Segment]:
        params = {"videoID": _video_id(video), **self._segment_params(categories, required_segments)}
        data = await self._r.get_json("/api/skipSegments", params=params)
        return wire.segments_from_wire(data)

    async def get_segments_privately(
        self,
        video: util.VideoResolvable,
        categories: Optional[Iterable[str]] = None,
        *required_segments: str,
    ) -> list[t.Segment]:
        entry = await lookup.fetch_bucket(
            self._r, "/api/skipSegments", _video_id(video),
            params=self._segment_params(categories, required_segments),
        )
        return wire.video_from_wire(entry).segments

    async def post_segments(self, video: util.VideoResolvable, *segments: t.LocalSegment):
        if not segments:
            raise ValueError("at least one segment is required")
        await self._r.post("/api/skipSegments", body={
            "videoID": _video_id(video),
            "userID": self.user_id,
            "segments": [wire.local_segment_to_wire(s) for s in segments],
            "userAgent": self.options.user_agent,
        })

    async def vote(self, segment: util.SegmentResolvable, type: Union[t.VoteType, str, int]):
        await self._r.get("/api/voteOnSponsorTime", params={
            "UUID": _segment_uuid(segment),
            "userID": self.user_id,
            "type": _enum_value(t.VoteType, type),
        })

    async def vote_category(self, segment: util.SegmentResolvable, category: str):
        await self._r.get("/api/voteOnSponsorTime", params={
            "UUID": _segment_uuid(segment),
            "userID": self.user_id,
            "category": category,
        })

    async def viewed(self, segment: util.SegmentResolvable):
        await self._r.post("/api/viewedVideoSponsorTime", params={"UUID": _segment_uuid(segment)})

    async def get_views(self) -> int:
        data = await self._r.get_json("/api/getViewsForUser", params={"userID": self.user_id})
        return data["viewCount"]

    async def get_time_saved(self) -> float:
        data = await self._r.get_json("/api/getSavedTimeForUser", params={"userID": self.user_id})
        return data["timeSaved"]

    async def set_username(self, username: str):
        await self._r.post("/api/setUsername", params={"userID": self.user_id, "username": username})

    async def get_username(self) -> str:
        data = await self._r.get_json("/api/getUsername", params={"userID": self.user_id})
        return data["userName"]

    async def get_top_users(self, sort_type: Union[t.SortType, str, int] = t.SortType.minutesSaved) -> list[t.UserStat]:
        data = await self._r.get_json("/api/getTopUsers", params={"sortType": _enum_value(t.SortType, sort_type)})
        return wire.user_stats_from_columns(data)

    async def get_overall_stats(self) -> t.OverallStats:
        data = await self._r.get_json("/api/getTotalStats")
        return wire.overall_stats_from_wire(data)

    async def get_days_saved(self) -> float:
        data = await self._r.get_json("/api/getDaysSavedFormatted")
        return float(data["daysSaved"])

    async def is_vip(self) -> bool:
        data = await self._r.get_json("/api/isUserVIP", params={"userID": self.user_id})
        return bool(data["vip"])

    async def check_authorization(self) -> bool:
        vip = await self.is_vip()
        if not vip:
            logger.warning("User is not VIP, VIP methods will be unauthorized")
        return vip

    def get_hashed_user_id(self) -> str:
        if self._hashed_user_id is None:
            self._hashed_user_id = hashing.hashed_user_id(self.user_id)
        return self._hashed_user_id

    async def get_segment_info(self, segments: Iterable[util.SegmentResolvable]) -> list[t.SegmentInfo]:
        uuids = [_segment_uuid(s) for s in segments]
        data = await self._r.get_json("/api/segmentInfo", params={"UUIDs": uuids})
        return [wire.segment_info_from_wire(d) for d in data]

    async def get_user_id(self, username: str, exact: bool = False) -> list[t.UserIDPair]:
        data = await self._r.get_json("/api/userID", params={"username": username, "exact": exact})
        return [wire.user_id_pair_from_wire(d) for d in data]

    async def get_lock_categories(self, video: util.VideoResolvable) -> list[str]:
        data = await self._r.get_json("/api/lockCategories", params={"videoID": _video_id(video)})
        return list(data["categories"])

    async def get_lock_categories_privately(self, video: util.VideoResolvable) -> list[str]:
        entry = await lookup.fetch_bucket(self._r, "/api/lockCategories", _video_id(video))
        return wire.locked_video_from_wire(entry).categories


def create(user_id: str, http: Optional[httpx.AsyncClient] = None, **overrides) -> SponsorBlock:
    return SponsorBlock(user_id, DEFAULT_OPTIONS.merge(overrides), http=http)
