import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from sponsorblock import hashing

VERSION = "0.1.0"

DEFAULT_BASE_URL = "https://sponsor.ajay.app"
DEFAULT_HASH_PREFIX_LENGTH = 4
DEFAULT_SERVICE = "YouTube"
DEFAULT_USER_AGENT = f"sponsorblock-py/{VERSION}"

ENV_PREFIX = "SPONSORBLOCK_"


@dataclass(frozen=True)
class Options:
    """Per-client settings, fixed once the client is built."""
    base_url: str = DEFAULT_BASE_URL
    hash_prefix_length: int = DEFAULT_HASH_PREFIX_LENGTH
    service: str = DEFAULT_SERVICE
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        if not self.base_url:
            raise ValueError("base_url is required")
        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url[:-1])
        hashing.check_prefix_length(self.hash_prefix_length)

    def merge(self, overrides: Optional[Mapping[str, Any]] = None) -> "Options":
        """Return a copy with the non-None overrides applied."""
        if not overrides:
            return self
        known = {f.name for f in dataclasses.fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Options":
        env = os.environ if environ is None else environ
        prefix_length = env.get(f"{ENV_PREFIX}HASH_PREFIX_LENGTH")
        return DEFAULT_OPTIONS.merge({
            "base_url": env.get(f"{ENV_PREFIX}BASE_URL"),
            "hash_prefix_length": int(prefix_length) if prefix_length else None,
            "service": env.get(f"{ENV_PREFIX}SERVICE"),
            "user_agent": env.get(f"{ENV_PREFIX}USER_AGENT"),
        })


DEFAULT_OPTIONS = Options()
