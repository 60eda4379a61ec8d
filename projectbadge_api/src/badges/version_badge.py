from html import escape
import logging
import re
from typing import Optional
from urllib.parse import quote

from projectbadge_api.src.config import BadgesConfig, Config
from projectbadge_api.src.exceptions import BadgeRenderError
from projectbadge_api.src.models import ProjectRelease, ReleaseStatus, RenderedBadge

log = logging.getLogger()

BADGE_HEIGHT = 20

# Characters allowed inside a quoted entity-tag (RFC 9110 etagc, ASCII only)
ETAG_SAFE_LABEL = re.compile(r"[\x21\x23-\x7e]+")

SVG_TEMPLATE = """\
<svg xmlns="http://www.w3.org/2000/svg" width="{total_width}" height="{height}" \
role="img" aria-label="{title}">
  <title>{title}</title>
  <linearGradient id="s" x2="0" y2="100%">
    <stop offset="0" stop-color="#bbb" stop-opacity=".1"/>
    <stop offset="1" stop-opacity=".1"/>
  </linearGradient>
  <clipPath id="r">
    <rect width="{total_width}" height="{height}" rx="3" fill="#fff"/>
  </clipPath>
  <g clip-path="url(#r)">
    <rect width="{label_width}" height="{height}" fill="{label_colour}"/>
    <rect x="{label_width}" width="{value_width}" height="{height}" \
fill="{value_colour}"/>
    <rect width="{total_width}" height="{height}" fill="url(#s)"/>
  </g>
  <g fill="#fff" text-anchor="middle" \
font-family="Verdana,Geneva,DejaVu Sans,sans-serif" \
text-rendering="geometricPrecision" font-size="110">
    <text aria-hidden="true" x="{label_x}" y="150" fill="#010101" \
fill-opacity=".3" transform="scale(.1)">{label}</text>
    <text x="{label_x}" y="140" transform="scale(.1)">{label}</text>
    <text aria-hidden="true" x="{value_x}" y="150" fill="#010101" \
fill-opacity=".3" transform="scale(.1)">{value}</text>
    <text x="{value_x}" y="140" transform="scale(.1)">{value}</text>
  </g>
</svg>
"""


class VersionBadge:
    """
    Renders a shields.io style "flat" badge showing a project's name on the left and
    the version of a release on the right. The colour of the right half reflects the
    status of the release
    """

    def __init__(self, badges_config: Optional[BadgesConfig] = None) -> None:
        self.config = badges_config or Config.config.badges

    def render(self, project_name: str, release: ProjectRelease) -> RenderedBadge:
        version_name = release.version_name
        try:
            svg = self.to_svg(project_name, version_name, release.release_status)
        except (KeyError, ValueError) as exc:
            log.error(
                "Failed to render badge for '%s' %s: %s",
                project_name,
                version_name,
                exc,
            )
            raise BadgeRenderError() from exc

        return RenderedBadge(
            svg=svg.encode("utf-8"),
            etag=entity_tag(version_name),
            max_age=self.config.max_age_seconds,
        )

    def to_svg(
        self,
        label: str,
        value: str,
        release_status: ReleaseStatus,
    ) -> str:
        label_width = self.text_width(label)
        value_width = self.text_width(value)

        # Text is drawn at 10x scale then shrunk with `scale(.1)` for crisper output
        return SVG_TEMPLATE.format(
            total_width=label_width + value_width,
            height=BADGE_HEIGHT,
            label_width=label_width,
            value_width=value_width,
            label_colour=self.config.label_colour,
            value_colour=self.status_colour(release_status),
            label_x=label_width * 5,
            value_x=label_width * 10 + value_width * 5,
            title=escape(f"{label}: {value}"),
            label=escape(label),
            value=escape(value),
        )

    def text_width(self, text: str) -> int:
        return int(len(text) * self.config.char_width + self.config.padding * 2)

    def status_colour(self, release_status: ReleaseStatus) -> str:
        colours = self.config.colours
        return {
            ReleaseStatus.GENERAL_AVAILABILITY: colours.general_availability,
            ReleaseStatus.PRERELEASE: colours.prerelease,
            ReleaseStatus.SNAPSHOT: colours.snapshot,
        }[release_status]


def entity_tag(version_name: str) -> str:
    """
    Wrap a version label in double quotes for use as an ETag. Labels containing
    characters that can't appear in a header (non-ASCII, spaces, quotes) are
    percent-encoded first
    """
    if not ETAG_SAFE_LABEL.fullmatch(version_name):
        version_name = quote(version_name, safe="")
    return f'"{version_name}"'
