import pytest

from projectbadge_api.src.badges.version_badge import entity_tag, VersionBadge
from projectbadge_api.src.config import BadgeColours, BadgesConfig
from projectbadge_api.src.exceptions import BadgeRenderError
from projectbadge_api.src.models import ProjectRelease, ReleaseStatus


class TestVersionBadge:
    def test_render(self):
        release = ProjectRelease(version_name="1.0.RELEASE", is_current=True)

        badge = VersionBadge().render("Spring Data Redis", release)

        assert badge.etag == '"1.0.RELEASE"'
        assert badge.max_age == 3600
        svg = badge.svg.decode("utf-8")
        assert svg.startswith("<svg")
        assert "<title>Spring Data Redis: 1.0.RELEASE</title>" in svg
        assert ">Spring Data Redis</text>" in svg
        assert ">1.0.RELEASE</text>" in svg

    def test_render_uses_config(self):
        badges_config = BadgesConfig(
            max_age_seconds=60,
            label_colour="#000",
            colours=BadgeColours(general_availability="#123456"),
        )
        release = ProjectRelease(version_name="2.0.0")

        badge = VersionBadge(badges_config).render("Spring Boot", release)

        assert badge.max_age == 60
        svg = badge.svg.decode("utf-8")
        assert 'fill="#000"' in svg
        assert 'fill="#123456"' in svg

    @pytest.mark.parametrize(
        "release_status, expected_colour",
        [
            pytest.param(
                ReleaseStatus.GENERAL_AVAILABILITY,
                "#6db33f",
                id="General availability",
            ),
            pytest.param(ReleaseStatus.PRERELEASE, "#dfb317", id="Prerelease"),
            pytest.param(ReleaseStatus.SNAPSHOT, "#9f9f9f", id="Snapshot"),
        ],
    )
    def test_status_colour(self, release_status, expected_colour):
        assert VersionBadge(BadgesConfig()).status_colour(release_status) == (
            expected_colour
        )

    def test_widths(self):
        badge = VersionBadge(BadgesConfig(char_width=5.0, padding=4))

        assert badge.text_width("Redis") == 33
        svg = badge.to_svg("Redis", "1.0", ReleaseStatus.GENERAL_AVAILABILITY)
        assert 'width="56"' in svg
        assert 'x="165"' in svg
        assert 'x="445"' in svg

    def test_render_escapes_text(self):
        release = ProjectRelease(version_name='1.0"<beta>')

        badge = VersionBadge().render("R&D <Tools>", release)

        svg = badge.svg.decode("utf-8")
        assert ">R&amp;D &lt;Tools&gt;</text>" in svg
        assert ">1.0&quot;&lt;beta&gt;</text>" in svg
        assert "<Tools>" not in svg
        assert "<beta>" not in svg

    def test_render_error(self, mocker):
        mocker.patch.object(VersionBadge, "to_svg", side_effect=KeyError("label"))
        release = ProjectRelease(version_name="1.0.RELEASE")

        with pytest.raises(BadgeRenderError, match="Badge could not be rendered"):
            VersionBadge().render("Spring Data Redis", release)


class TestEntityTag:
    @pytest.mark.parametrize(
        "version_name, expected_etag",
        [
            pytest.param("1.0.RELEASE", '"1.0.RELEASE"', id="Release"),
            pytest.param("Brixton-SR2", '"Brixton-SR2"', id="Release train"),
            pytest.param("2.0-β1", '"2.0-%CE%B21"', id="Non-ASCII"),
            pytest.param('1.0"x', '"1.0%22x"', id="Double quote"),
            pytest.param("1.0 beta", '"1.0%20beta"', id="Space"),
        ],
    )
    def test_entity_tag(self, version_name, expected_etag):
        assert entity_tag(version_name) == expected_etag

    def test_render_keeps_label_in_svg(self):
        release = ProjectRelease(version_name="2.0-β1")

        badge = VersionBadge().render("Spring Boot", release)

        assert badge.etag == '"2.0-%CE%B21"'
        assert ">2.0-β1</text>" in badge.svg.decode("utf-8")
