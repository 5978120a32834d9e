import re
from typing import NamedTuple

__all__ = ["version", "version_info"]


version = "1.0.0"


_re_version = re.compile(
    r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)(?P<level>\D*)(?P<serial>\d*)"
)

_release_levels = {"a": "alpha", "b": "beta", "c": "candidate", "r": "candidate"}


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    releaselevel: str
    serial: int

    @classmethod
    def from_str(cls, v: str) -> "VersionInfo":
        match = _re_version.match(v)
        if not match:
            raise ValueError(f"Invalid version: {v!r}")
        level = _release_levels.get(match.group("level")[:1], "final")
        return cls(
            int(match.group("major")),
            int(match.group("minor")),
            int(match.group("micro")),
            level,
            int(match.group("serial") or 0),
        )

    def __str__(self) -> str:
        v = f"{self.major}.{self.minor}.{self.micro}"
        if self.releaselevel != "final":
            v += f"{self.releaselevel[:1]}{self.serial}"
        return v


version_info = VersionInfo.from_str(version)
