"""Tests for the portfolio data model and enumerations."""

from __future__ import annotations

import dataclasses

import pytest

from portfolio_builder.constants import DEFAULT_FONT, DEFAULT_LAYOUT, Font, Layout, Platform
from portfolio_builder.models import PortfolioState, Project, SocialLink, default_portfolio


class TestEnums:
    def test_layout_parse_known(self) -> None:
        assert Layout.parse("minimal") is Layout.MINIMAL
        assert Layout.parse("modern") is Layout.MODERN

    @pytest.mark.parametrize("value", ["", "grid", None, 3, "MODERN", " minimal "])
    def test_layout_parse_unknown(self, value: object) -> None:
        assert Layout.parse(value) is DEFAULT_LAYOUT
        assert DEFAULT_LAYOUT is Layout.BOLD

    def test_font_parse(self) -> None:
        assert Font.parse("Space Grotesk") is Font.SPACE_GROTESK
        assert Font.parse("Comic Sans") is DEFAULT_FONT
        assert Font.parse("space grotesk") is DEFAULT_FONT
        assert DEFAULT_FONT is Font.INTER

    def test_platform_values(self) -> None:
        assert {p.value for p in Platform} == {
            "github",
            "twitter",
            "linkedin",
            "instagram",
            "youtube",
            "email",
            "website",
        }


class TestPortfolioState:
    def test_round_trip_through_dict(self) -> None:
        state = default_portfolio()
        assert PortfolioState.from_dict(state.to_dict()) == state

    def test_to_dict_uses_camel_case(self) -> None:
        data = default_portfolio().to_dict()

        assert data["meta"]["ogImage"] == "https://picsum.photos/1200/630"
        assert data["theme"]["primaryColor"] == "#4f46e5"
        assert data["theme"]["backgroundOverlay"] == 0.9
        assert data["profile"]["resumeUrl"] == ""
        assert data["projects"][0]["imageUrl"].startswith("https://picsum.photos/600/400")
        assert data["projects"][0]["tags"] == ["React", "Tailwind", "Recharts"]

    def test_from_dict_tolerates_missing_keys(self) -> None:
        state = PortfolioState.from_dict({"profile": {"name": "Ada"}})

        assert state.profile.name == "Ada"
        assert state.profile.bio == ""
        assert state.skills == ()
        assert state.projects == ()
        assert state.theme.layout == ""
        assert state.theme.background_overlay == 0.9

    def test_from_dict_bad_overlay_uses_default(self) -> None:
        state = PortfolioState.from_dict({"theme": {"backgroundOverlay": "lots"}})
        assert state.theme.background_overlay == 0.9

    def test_from_dict_keeps_unknown_platform(self) -> None:
        state = PortfolioState.from_dict(
            {"socials": [{"id": "1", "platform": "mastodon", "url": "https://m.test"}]}
        )
        assert state.socials == (SocialLink(id="1", platform="mastodon", url="https://m.test"),)

    def test_sequences_are_tuples(self) -> None:
        state = PortfolioState.from_dict({"projects": [{"id": "1", "tags": ["a", None]}]})

        assert isinstance(state.projects, tuple)
        assert state.projects[0].tags == ("a", "")

    def test_bare_string_is_a_single_entry(self) -> None:
        state = PortfolioState.from_dict(
            {"skills": "Python", "projects": [{"id": "1", "tags": "React"}]}
        )

        assert state.skills == ("Python",)
        assert state.projects[0].tags == ("React",)

    def test_records_are_frozen(self) -> None:
        project = Project(id="1", title="T")
        with pytest.raises(dataclasses.FrozenInstanceError):
            project.title = "changed"  # type: ignore[misc]


class TestDefaultPortfolio:
    def test_contents(self) -> None:
        state = default_portfolio()

        assert state.profile.name == "John Doe"
        assert state.theme.layout == "modern"
        assert state.theme.font == "Inter"
        assert len(state.skills) == 8
        assert len(state.experiences) == 2
        assert [s.platform for s in state.socials] == ["github", "linkedin", "twitter", "email"]
        assert all(p.link == "#" for p in state.projects)

    def test_ids_unique(self) -> None:
        state = default_portfolio()
        for items in (state.experiences, state.socials, state.projects):
            ids = [item.id for item in items]
            assert len(ids) == len(set(ids))
