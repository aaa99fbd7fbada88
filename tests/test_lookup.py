import pydantic
import pytest

from sponsorblock import errors, lookup

from conftest import VIDEO_ID, run

PREFIX = "d036"


def _bucket_entry(video_id, segments=None):
    return {"videoID": video_id, "hash": PREFIX + "0" * 60, "segments": segments or []}


def test_select_video_exact_match():
    bucket = [_bucket_entry("other1"), _bucket_entry(VIDEO_ID), _bucket_entry("other2")]
    assert lookup.select_video(bucket, VIDEO_ID, PREFIX)["videoID"] == VIDEO_ID


def test_select_video_miss():
    bucket = [_bucket_entry("aaaaaaaaaaa"), _bucket_entry("bbbbbbbbbbb"), _bucket_entry("ccccccccccc")]
    with pytest.raises(errors.LookupMiss) as info:
        lookup.select_video(bucket, VIDEO_ID, PREFIX)
    assert info.value.video_id == VIDEO_ID
    assert info.value.hash_prefix == PREFIX


def test_get_segments_privately_sends_only_prefix(client, service):
    service.on("GET", f"/api/skipSegments/{PREFIX}", body=[
        _bucket_entry("other1", [{"UUID": "x", "segment": [0, 1], "category": "intro", "videoDuration": 5}]),
        _bucket_entry(VIDEO_ID, [{"UUID": "u1", "segment": [10, 20], "category": "sponsor", "videoDuration": 300}]),
    ])

    segments = run(client.get_segments_privately(VIDEO_ID))

    assert [s.uuid for s in segments] == ["u1"]
    assert segments[0].start_time == 10.0
    assert VIDEO_ID not in str(service.last.url)
    assert service.last.url.params["service"] == "YouTube"


def test_get_segments_privately_miss(client, service):
    service.on("GET", f"/api/skipSegments/{PREFIX}", body=[
        _bucket_entry("aaaaaaaaaaa"), _bucket_entry("bbbbbbbbbbb"), _bucket_entry("ccccccccccc"),
    ])
    with pytest.raises(errors.LookupMiss):
        run(client.get_segments_privately(VIDEO_ID))


def test_get_segments_privately_empty_bucket_is_a_miss(client, service):
    service.on("GET", f"/api/skipSegments/{PREFIX}", body=[])
    with pytest.raises(errors.LookupMiss):
        run(client.get_segments_privately(VIDEO_ID))


def test_get_segments_privately_transport_404(client, service):
    service.on("GET", f"/api/skipSegments/{PREFIX}", status=404)
    with pytest.raises(errors.NotFound):
        run(client.get_segments_privately(VIDEO_ID))


def test_prefix_length_follows_options(service):
    import httpx
    from sponsorblock import api
    from sponsorblock.options import Options

    http = httpx.AsyncClient(transport=httpx.MockTransport(service.handler))
    sb = api.SponsorBlock("test", Options(base_url="https://sponsor.test", hash_prefix_length=6), http=http)
    service.on("GET", "/api/skipSegments/d03636", body=[_bucket_entry(VIDEO_ID)])

    assert run(sb.get_segments_privately(VIDEO_ID)) == []
    assert service.last.url.path == "/api/skipSegments/d03636"


def test_get_lock_categories_privately(client, service):
    service.on("GET", f"/api/lockCategories/{PREFIX}", body=[
        {"videoID": "other1", "hash": "d036aa", "categories": ["intro"]},
        {"videoID": VIDEO_ID, "hash": "d036bb", "categories": ["sponsor", "selfpromo"], "reason": ""},
    ])
    assert run(client.get_lock_categories_privately(VIDEO_ID)) == ["sponsor", "selfpromo"]


@pytest.mark.parametrize("body", [
    {"message": "unexpected"},
    ["d036aa", "d036bb"],
    [1, 2, 3],
])
def test_malformed_bucket_is_a_validation_error(client, service, body):
    service.on("GET", f"/api/skipSegments/{PREFIX}", body=body)
    with pytest.raises(pydantic.ValidationError):
        run(client.get_segments_privately(VIDEO_ID))
