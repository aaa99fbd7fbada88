from collections.abc import Mapping
from typing import Any, Callable, Iterable, NewType, Optional, TypeVar, Union
from urllib import parse as urlparse

from sponsorblock import types as t

Json = NewType('Json', Any)

T = TypeVar('T')

VideoResolvable = Union[t.VideoID, t.Video, t.LockedVideo, Mapping]
SegmentResolvable = Union[t.SegmentUUID, t.Segment, t.SegmentInfo, Mapping]


def find(pred: Callable[[T], bool], items: Iterable[T]) -> Optional[T]:
    return next((x for x in items if pred(x)), None)


def _resolve(resolvable: Any, attr: str, key: str) -> Optional[str]:
    if isinstance(resolvable, str):
        return resolvable
    if isinstance(resolvable, Mapping):
        return resolvable.get(key)
    return getattr(resolvable, attr, None)


def resolve_video(resolvable: VideoResolvable) -> Optional[t.VideoID]:
    return _resolve(resolvable, 'video_id', 'videoID')


def resolve_segment(resolvable: SegmentResolvable) -> Optional[t.SegmentUUID]:
    return _resolve(resolvable, 'uuid', 'UUID')


def require_id(value: Optional[str], what: str) -> str:
    """Reject an identifier the resolver could not produce."""
    if not isinstance(value, str) or not value:
        raise ValueError(f'Could not resolve a {what} identifier from the given value')
    return value


def extract_video_id(url: str) -> Optional[str]:
    parsed = urlparse.urlparse(url)
    params = urlparse.parse_qs(parsed.query)
    if 'v' in params:
        return params['v'][0]
    if parsed.hostname in ('youtu.be', 'www.youtu.be'):
        return parsed.path.lstrip('/').split('/')[0] or None
    pieces = [p for p in parsed.path.split('/') if p]
    if len(pieces) >= 2 and pieces[0] in ('embed', 'v', 'shorts', 'live'):
        return pieces[1]
    return None
