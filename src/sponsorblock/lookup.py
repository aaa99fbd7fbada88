"""k-anonymous lookups by SHA-256 prefix.

The service only ever sees the first few hex characters of the video id's
hash and answers with every video in that bucket. Picking the requested
video out of the bucket happens here, locally.
"""
import logging
from typing import Any, Mapping, Optional

from sponsorblock import errors, hashing, util, wire
from sponsorblock.transport import Requester

logger = logging.getLogger(__name__)


def select_video(bucket: list[dict[str, Any]], video_id: str, prefix: str) -> util.Json:
    match = util.find(lambda entry: entry.get("videoID") == video_id, bucket)
    if match is None:
        logger.warning("videoID %s missing from %d-entry bucket for prefix %s", video_id, len(bucket), prefix)
        raise errors.LookupMiss(video_id, prefix)
    return match


async def fetch_bucket(
    requester: Requester,
    path: str,
    video_id: str,
    params: Optional[Mapping[str, Any]] = None,
) -> util.Json:
    prefix = hashing.hash_prefix(video_id, requester.options.hash_prefix_length)
    bucket = await requester.get_json(f"{path}/{prefix}", params=params)
    return select_video(wire.BUCKET.validate_python(bucket), video_id, prefix)
