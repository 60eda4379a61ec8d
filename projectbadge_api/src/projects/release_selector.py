import logging
import re
from typing import Optional, Sequence, Tuple

from projectbadge_api.src.models import ProjectRelease

log = logging.getLogger()

# Matches the numeric part at the start of labels such as "1.0.RELEASE" or "2.3.1-M1".
# Release train names (e.g. "Angel-SR6") have no numeric prefix
NUMERIC_VERSION_PREFIX = re.compile(r"^(\d+(?:\.\d+)*)")


class ReleaseSelector:
    """
    Picks the release of a project that should be advertised, for example on a version
    badge
    """

    @staticmethod
    def select(releases: Sequence[ProjectRelease]) -> Optional[ProjectRelease]:
        """
        Return the first release flagged as current. If no release carries the flag,
        fall back to `fallback_release()`. `None` is returned for an empty sequence
        """
        if not releases:
            return None

        for release in releases:
            if release.is_current:
                return release

        log.debug(
            "No current release out of %d, using fallback release",
            len(releases),
        )
        return ReleaseSelector.fallback_release(releases)

    @staticmethod
    def fallback_release(releases: Sequence[ProjectRelease]) -> ProjectRelease:
        """
        When every release is labelled with a numeric version, the highest of those
        versions wins. Otherwise the first release (in the order they were added) is
        used, so symbolic names are never compared against each other
        """
        numeric_versions = [
            ReleaseSelector.numeric_version(release.version_name)
            for release in releases
        ]
        if any(version is None for version in numeric_versions):
            return releases[0]

        highest_index = 0
        for index, version in enumerate(numeric_versions):
            if version > numeric_versions[highest_index]:
                highest_index = index
        return releases[highest_index]

    @staticmethod
    def numeric_version(version_name: str) -> Optional[Tuple[int, ...]]:
        """
        Convert the numeric prefix of a version label into a tuple of ints, or `None`
        if the label doesn't start with a number
        """
        match = NUMERIC_VERSION_PREFIX.match(version_name)
        if not match:
            return None
        return tuple(int(part) for part in match.group(1).split("."))
