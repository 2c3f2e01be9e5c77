"""End-to-end tests for portfolio rendering across all layouts."""

from __future__ import annotations

from dataclasses import replace

import pytest

from portfolio_builder.models import PortfolioState, Project, SocialLink
from portfolio_builder.services.renderer import render_portfolio, render_portfolio_from_dict

YEAR = 2024
LAYOUTS = ["modern", "minimal", "bold"]


def _project_card(html: str, title: str) -> str:
    """Return the markup of the project card whose heading is *title*."""
    for chunk in html.split('<article class="project-card')[1:]:
        card = chunk.split("</article>")[0]
        if f">{title}</h3>" in card:
            return card
    raise AssertionError(f"No project card titled {title!r}")


# ======================================================================
# Content present in every layout
# ======================================================================


class TestContentAcrossLayouts:
    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_profile_projects_and_roles_present(self, make_state, layout: str) -> None:
        state = make_state(layout=layout)
        html = render_portfolio(state, year=YEAR)

        assert state.profile.name in html
        assert state.profile.bio in html
        for project in state.projects:
            assert project.title in html
        for exp in state.experiences:
            assert exp.role in html

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_is_complete_document(self, make_state, layout: str) -> None:
        html = render_portfolio(make_state(layout=layout), year=YEAR)

        assert html.startswith("<!DOCTYPE html>")
        assert html.rstrip().endswith("</html>")
        assert "<head>" in html
        assert "<body" in html

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_rendering_is_deterministic(self, make_state, layout: str) -> None:
        state = make_state(layout=layout)

        assert render_portfolio(state, year=YEAR) == render_portfolio(state, year=YEAR)

    def test_does_not_modify_snapshot(self, sample_state: PortfolioState) -> None:
        before = sample_state.to_dict()
        render_portfolio(sample_state, year=YEAR)

        assert sample_state.to_dict() == before


# ======================================================================
# Layout selection
# ======================================================================


class TestLayoutSelection:
    def test_modern_markers(self, make_state) -> None:
        html = render_portfolio(make_state(layout="modern"), year=YEAR)
        assert "Selected Projects" in html
        assert "Send me an email" in html

    def test_minimal_markers(self, make_state) -> None:
        html = render_portfolio(make_state(layout="minimal"), year=YEAR)
        assert "Work Experience" in html
        assert "&copy; 2024 John Doe." in html

    def test_bold_markers(self, make_state) -> None:
        html = render_portfolio(make_state(layout="bold"), year=YEAR)
        assert "Featured Work" in html
        assert "Ready to collaborate?" in html

    @pytest.mark.parametrize("layout", ["", "brutalist", "MODERNISH", "null"])
    def test_unknown_layout_falls_back_to_bold(self, make_state, layout: str) -> None:
        fallback = render_portfolio(make_state(layout=layout), year=YEAR)
        bold = render_portfolio(make_state(layout="bold"), year=YEAR)

        assert fallback == bold

    @pytest.mark.parametrize("layout", ["Minimal", "MODERN", " bold "])
    def test_layout_name_must_match_exactly(self, make_state, layout: str) -> None:
        other_case = render_portfolio(make_state(layout=layout), year=YEAR)
        bold = render_portfolio(make_state(layout="bold"), year=YEAR)

        assert other_case == bold

    def test_copyright_uses_current_year_by_default(self, make_state) -> None:
        from datetime import date

        html = render_portfolio(make_state(layout="minimal"))
        assert f"&copy; {date.today().year} " in html


# ======================================================================
# Section suppression
# ======================================================================


class TestSectionSuppression:
    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_no_skills_container_without_skills(self, make_state, layout: str) -> None:
        html = render_portfolio(make_state(layout=layout, skills=()), year=YEAR)
        assert 'id="skills"' not in html

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_skills_container_with_skills(self, make_state, layout: str) -> None:
        html = render_portfolio(make_state(layout=layout), year=YEAR)
        assert 'id="skills"' in html

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_no_experience_container_without_experience(self, make_state, layout: str) -> None:
        html = render_portfolio(make_state(layout=layout, experiences=()), year=YEAR)
        assert 'id="experience"' not in html
        assert "experience-entry" not in html

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_projects_container_kept_when_empty(self, make_state, layout: str) -> None:
        html = render_portfolio(make_state(layout=layout, projects=()), year=YEAR)
        assert 'id="projects"' in html
        assert "project-card" not in html

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_bare_snapshot_renders(self, bare_state: PortfolioState, layout: str) -> None:
        state = replace(bare_state, theme=replace(bare_state.theme, layout=layout))
        html = render_portfolio(state, year=YEAR)

        assert "Bare Person" in html
        assert "Download Resume" not in html
        assert 'aria-disabled="true"' in html

    @pytest.mark.parametrize("layout", ["modern", "bold"])
    def test_resume_link_only_when_set(self, sample_state: PortfolioState, layout: str) -> None:
        state = replace(
            sample_state,
            theme=replace(sample_state.theme, layout=layout),
            profile=replace(sample_state.profile, resume_url="https://cv.example.com/me.pdf"),
        )
        html = render_portfolio(state, year=YEAR)
        assert 'href="https://cv.example.com/me.pdf"' in html

    def test_empty_avatar_omits_image(self, make_state) -> None:
        base = make_state(layout="minimal")
        state = replace(base, profile=replace(base.profile, avatar=""), socials=())
        html = render_portfolio(state, year=YEAR)

        assert "picsum.photos/400/400" not in html
        assert 'alt="John Doe"' not in html


# ======================================================================
# Background and overlay
# ======================================================================


class TestBackground:
    def test_image_background_with_overlay(self, make_state) -> None:
        state = make_state(
            background_image="https://example.com/bg.jpg",
            background_overlay=0.9,
        )
        html = render_portfolio(state, year=YEAR)

        assert "background-image: url('https://example.com/bg.jpg')" in html
        assert "background-attachment: fixed" in html
        assert "background-size: cover" in html
        assert '<div class="bg-overlay"></div>' in html
        assert "opacity: 0.9" in html

    def test_flat_background_without_overlay(self, make_state) -> None:
        html = render_portfolio(make_state(background_image=""), year=YEAR)

        assert 'class="bg-overlay"' not in html
        assert ".bg-overlay" not in html
        assert "background-color: #f8fafc;" in html

    def test_gradient_background_is_not_wrapped_in_url(self, make_state) -> None:
        state = make_state(background_image="linear-gradient(to right, #000000, #ffffff)")
        html = render_portfolio(state, year=YEAR)

        assert "background-image: linear-gradient(to right, #000000, #ffffff);" in html
        assert "url('linear-gradient" not in html


# ======================================================================
# Escaping
# ======================================================================


class TestEscaping:
    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_script_in_bio_is_escaped(self, sample_state: PortfolioState, layout: str) -> None:
        state = replace(
            sample_state,
            theme=replace(sample_state.theme, layout=layout),
            profile=replace(sample_state.profile, bio="<script>alert(1)</script>"),
        )
        html = render_portfolio(state, year=YEAR)

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    def test_quotes_in_attributes_are_escaped(self, sample_state: PortfolioState) -> None:
        state = replace(
            sample_state,
            meta=replace(sample_state.meta, description='Say "hi" & <b>bye</b>'),
        )
        html = render_portfolio(state, year=YEAR)

        assert 'content="Say &quot;hi&quot; &amp; &lt;b&gt;bye&lt;/b&gt;"' in html

    def test_style_breakout_in_color_is_neutralised(self, make_state) -> None:
        html = render_portfolio(
            make_state(background_color="red;}</style><script>x()</script>"),
            year=YEAR,
        )
        assert "</style><script>" not in html


# ======================================================================
# Scenario from the editor
# ======================================================================


class TestMinimalEmailScenario:
    def test_demo_project_without_image_and_email_link(self, make_state) -> None:
        state = make_state(
            layout="minimal",
            projects=(
                Project(id="p1", title="Demo", description="A demo.", link="#", image_url=""),
            ),
            socials=(SocialLink(id="s1", platform="email", url="mailto:a@b.com"),),
        )
        html = render_portfolio(state, year=YEAR)

        assert "Demo" in html
        assert "<img" not in _project_card(html, "Demo")
        assert 'href="mailto:a@b.com"' in html
        assert 'href="#"' in html

    def test_mixed_case_platform_is_not_email(self, make_state) -> None:
        state = make_state(
            layout="minimal",
            socials=(SocialLink(id="s1", platform="Email", url="mailto:a@b.com"),),
        )
        html = render_portfolio(state, year=YEAR)

        assert 'aria-disabled="true"' in html
        assert "cdn.simpleicons.org/email/" not in html
        assert "cdn.simpleicons.org/Email/4f46e5" in html


class TestRenderFromDict:
    def test_camel_case_payload(self, sample_state: PortfolioState) -> None:
        html = render_portfolio_from_dict(sample_state.to_dict(), year=YEAR)
        assert html == render_portfolio(sample_state, year=YEAR)

    def test_empty_payload_still_renders(self) -> None:
        html = render_portfolio_from_dict({}, year=YEAR)
        assert html.startswith("<!DOCTYPE html>")
        assert 'id="projects"' in html
