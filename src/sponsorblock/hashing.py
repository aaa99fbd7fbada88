import hashlib

MIN_PREFIX_LENGTH = 3
MAX_PREFIX_LENGTH = 32
USER_ID_ROUNDS = 5000


def sha256_hex(text: str) -> str:
    return hashlib.sha256(text.encode('utf-8')).hexdigest()


def check_prefix_length(length: int) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(f'hash prefix length must be an int, got {length!r}')
    if not MIN_PREFIX_LENGTH <= length <= MAX_PREFIX_LENGTH:
        raise ValueError(
            f'hash prefix length must be between {MIN_PREFIX_LENGTH} and {MAX_PREFIX_LENGTH}, got {length}'
        )
    return length


def hash_prefix(video_id: str, length: int) -> str:
    """Leading hex characters of SHA-256(video_id), as the server buckets them."""
    return sha256_hex(video_id)[:check_prefix_length(length)]


def hashed_user_id(user_id: str, rounds: int = USER_ID_ROUNDS) -> str:
    """Public form of a private user id: SHA-256 applied `rounds` times to the hex text."""
    value = user_id
    for _ in range(rounds):
        value = sha256_hex(value)
    return value
