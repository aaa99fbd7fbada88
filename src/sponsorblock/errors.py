import httpx

PREFIX = '[SponsorBlock]'


class SponsorBlockError(Exception):
    """Base class for everything this package raises on purpose."""
    pass


class ResponseError(SponsorBlockError):
    """The service answered with a status other than 200."""

    def __init__(self, status: int, message: str | None = None):
        self.status = status
        self.message = message or f'{PREFIX} ResponseError: {status}'
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(status={self.status}, message={self.message!r})'


class InvalidInput(ResponseError):
    pass


class ModerationRejected(ResponseError):
    pass


class NotFound(ResponseError):
    pass


class Duplicate(ResponseError):
    pass


class RateLimited(ResponseError):
    pass


class UnexpectedStatus(ResponseError):
    pass


class LookupMiss(SponsorBlockError):
    """The hash-prefix bucket came back without the requested video."""

    def __init__(self, video_id: str, hash_prefix: str):
        self.video_id = video_id
        self.hash_prefix = hash_prefix
        super().__init__(
            f'{PREFIX} Not found within returned videos (videoID={video_id}, prefix={hash_prefix})'
        )


_STATUS_ERRORS: dict[int, tuple[type[ResponseError], str]] = {
    400: (InvalidInput, 'Bad Request (Your inputs are wrong/impossible)'),
    403: (ModerationRejected, 'Rejected by auto moderator or unauthorized'),
    404: (NotFound, 'Not Found'),
    405: (Duplicate, 'Duplicate'),
    409: (Duplicate, 'Duplicate'),
    429: (RateLimited, 'Rate Limit (Too many for the same user or IP)'),
}


def error_for_status(status: int) -> ResponseError | None:
    if status == 200:
        return None
    if status in _STATUS_ERRORS:
        cls, text = _STATUS_ERRORS[status]
        return cls(status, f'{PREFIX} {text}')
    return UnexpectedStatus(status, f'{PREFIX} Status code not 200 ({status})')


def status_check(response: httpx.Response) -> None:
    error = error_for_status(response.status_code)
    if error is not None:
        raise error
