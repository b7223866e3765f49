"""Parsing of the host version used in generated version requirements."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["VersionSpec"]


_SEMVER_PATTERN = re.compile(
    r"(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?",
    re.ASCII,
)


@dataclass(frozen=True, slots=True)
class VersionSpec:
    """Major, minor and leading pre-release tag of a semantic version."""

    major: int
    minor: int
    pre: str | None = None

    @classmethod
    def parse(cls, text: str) -> "VersionSpec":
        """Parse ``MAJOR.MINOR.PATCH[-PRE][+BUILD]``.

        Only the first dot separated identifier of the pre-release part is
        retained, so ``"1.16.0-rc.1"`` yields ``pre="rc"``.
        """

        match = _SEMVER_PATTERN.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"invalid semantic version: {text!r}")

        pre = match.group("pre")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            pre=pre.split(".", 1)[0] if pre else None,
        )

    @property
    def requirement(self) -> str:
        """Return the ``MAJOR.MINOR[-PRE]`` string used in version constraints."""

        base = f"{self.major}.{self.minor}"
        return f"{base}-{self.pre}" if self.pre else base

    def __str__(self) -> str:
        return self.requirement
