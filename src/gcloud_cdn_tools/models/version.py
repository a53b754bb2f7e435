from __future__ import annotations

import semver


class Version(semver.Version):
    @classmethod
    def try_parse(cls, version: str) -> Version | None:
        """Parse a version string, or None if it is not semver."""
        if not cls.is_valid(version):
            return None
        return cls.parse(version)
