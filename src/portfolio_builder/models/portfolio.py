"""In-memory portfolio snapshot.

A :class:`PortfolioState` is replaced wholesale on every edit; all records
are frozen and all sequences are tuples so a snapshot handed to the
renderer cannot change underneath it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_BACKGROUND_OVERLAY = 0.9


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _float(data: Mapping[str, Any], key: str, default: float) -> float:
    value = data.get(key)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _strings(values: Iterable[Any] | None) -> tuple[str, ...]:
    if not values:
        return ()
    # A bare string is one entry, not one entry per character.
    if isinstance(values, str):
        return (values,)
    return tuple("" if v is None else str(v) for v in values)


@dataclass(frozen=True, slots=True)
class Meta:
    """Document metadata used for the page head and social previews."""

    title: str = ""
    description: str = ""
    favicon: str = ""
    og_image: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Meta:
        return cls(
            title=_str(data, "title"),
            description=_str(data, "description"),
            favicon=_str(data, "favicon"),
            og_image=_str(data, "ogImage"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "favicon": self.favicon,
            "ogImage": self.og_image,
        }


@dataclass(frozen=True, slots=True)
class Theme:
    """Visual configuration.

    Attributes:
        layout: Layout name; unknown values render with the default layout.
        font: Font family name.
        primary_color: Accent color as a CSS hex string.
        background_color: Page background, also used for the overlay.
        background_image: Image URL or CSS gradient; empty means none.
        background_overlay: Overlay opacity in ``[0, 1]``.
        text_color: Body text color.
    """

    layout: str = "modern"
    font: str = "Inter"
    primary_color: str = "#4f46e5"
    background_color: str = "#f8fafc"
    background_image: str = ""
    background_overlay: float = DEFAULT_BACKGROUND_OVERLAY
    text_color: str = "#1e293b"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Theme:
        return cls(
            layout=_str(data, "layout"),
            font=_str(data, "font"),
            primary_color=_str(data, "primaryColor"),
            background_color=_str(data, "backgroundColor"),
            background_image=_str(data, "backgroundImage"),
            background_overlay=_float(data, "backgroundOverlay", DEFAULT_BACKGROUND_OVERLAY),
            text_color=_str(data, "textColor"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "layout": self.layout,
            "font": self.font,
            "primaryColor": self.primary_color,
            "backgroundColor": self.background_color,
            "backgroundImage": self.background_image,
            "backgroundOverlay": self.background_overlay,
            "textColor": self.text_color,
        }


@dataclass(frozen=True, slots=True)
class Profile:
    """The person the portfolio is about."""

    name: str = ""
    title: str = ""
    bio: str = ""
    avatar: str = ""
    location: str = ""
    resume_url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Profile:
        return cls(
            name=_str(data, "name"),
            title=_str(data, "title"),
            bio=_str(data, "bio"),
            avatar=_str(data, "avatar"),
            location=_str(data, "location"),
            resume_url=_str(data, "resumeUrl"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "bio": self.bio,
            "avatar": self.avatar,
            "location": self.location,
            "resumeUrl": self.resume_url,
        }


@dataclass(frozen=True, slots=True)
class Experience:
    """A single work-history entry. ``id`` is never rendered."""

    id: str
    company: str = ""
    role: str = ""
    period: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Experience:
        return cls(
            id=_str(data, "id"),
            company=_str(data, "company"),
            role=_str(data, "role"),
            period=_str(data, "period"),
            description=_str(data, "description"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "company": self.company,
            "role": self.role,
            "period": self.period,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class Project:
    """A showcased project card."""

    id: str
    title: str = ""
    description: str = ""
    link: str = ""
    image_url: str = ""
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Project:
        return cls(
            id=_str(data, "id"),
            title=_str(data, "title"),
            description=_str(data, "description"),
            link=_str(data, "link"),
            image_url=_str(data, "imageUrl"),
            tags=_strings(data.get("tags")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "imageUrl": self.image_url,
            "tags": list(self.tags),
        }


@dataclass(frozen=True, slots=True)
class SocialLink:
    """A social profile link.

    ``platform`` is kept as a plain string; values outside
    :class:`~portfolio_builder.constants.Platform` are accepted.
    """

    id: str
    platform: str
    url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SocialLink:
        return cls(
            id=_str(data, "id"),
            platform=_str(data, "platform"),
            url=_str(data, "url"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "platform": self.platform, "url": self.url}


@dataclass(frozen=True, slots=True)
class PortfolioState:
    """Root aggregate consumed by the renderer."""

    meta: Meta = field(default_factory=Meta)
    theme: Theme = field(default_factory=Theme)
    profile: Profile = field(default_factory=Profile)
    skills: tuple[str, ...] = ()
    experiences: tuple[Experience, ...] = ()
    socials: tuple[SocialLink, ...] = ()
    projects: tuple[Project, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PortfolioState:
        """Build a snapshot from the camelCase JSON shape used by the editor.

        Missing keys fall back to empty values so partially filled payloads
        still produce a renderable snapshot.
        """
        return cls(
            meta=Meta.from_dict(data.get("meta") or {}),
            theme=Theme.from_dict(data.get("theme") or {}),
            profile=Profile.from_dict(data.get("profile") or {}),
            skills=_strings(data.get("skills")),
            experiences=tuple(Experience.from_dict(e) for e in data.get("experiences") or ()),
            socials=tuple(SocialLink.from_dict(s) for s in data.get("socials") or ()),
            projects=tuple(Project.from_dict(p) for p in data.get("projects") or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "meta": self.meta.to_dict(),
            "theme": self.theme.to_dict(),
            "profile": self.profile.to_dict(),
            "skills": list(self.skills),
            "experiences": [e.to_dict() for e in self.experiences],
            "socials": [s.to_dict() for s in self.socials],
            "projects": [p.to_dict() for p in self.projects],
        }


def default_portfolio() -> PortfolioState:
    """Return the starter snapshot shown when the editor first opens."""
    return PortfolioState(
        meta=Meta(
            title="John Doe | Portfolio",
            description="Portfolio of a creative developer.",
            favicon="https://cdn.simpleicons.org/react",
            og_image="https://picsum.photos/1200/630",
        ),
        theme=Theme(),
        profile=Profile(
            name="John Doe",
            title="Creative Frontend Developer",
            bio=(
                "I build accessible, pixel-perfect, and performant web experiences. "
                "Passionate about UI/UX and open source."
            ),
            avatar="https://picsum.photos/400/400",
            location="New York, USA",
            resume_url="",
        ),
        skills=(
            "React",
            "TypeScript",
            "Tailwind CSS",
            "Node.js",
            "UI/UX Design",
            "Figma",
            "Next.js",
            "GraphQL",
        ),
        experiences=(
            Experience(
                id="1",
                company="Tech Corp",
                role="Senior Frontend Engineer",
                period="2022 - Present",
                description=(
                    "Leading the frontend team in building scalable web applications "
                    "using React and TypeScript."
                ),
            ),
            Experience(
                id="2",
                company="Startup Inc",
                role="Web Developer",
                period="2020 - 2022",
                description=(
                    "Collaborated with designers to implement responsive user interfaces "
                    "and improve site performance."
                ),
            ),
        ),
        socials=(
            SocialLink(id="1", platform="github", url="https://github.com"),
            SocialLink(id="2", platform="linkedin", url="https://linkedin.com"),
            SocialLink(id="3", platform="twitter", url="https://twitter.com"),
            SocialLink(id="4", platform="email", url="mailto:john@example.com"),
        ),
        projects=(
            Project(
                id="1",
                title="E-commerce Dashboard",
                description=(
                    "A comprehensive dashboard designed for online retailers to track "
                    "sales and analytics."
                ),
                link="#",
                image_url="https://picsum.photos/600/400?random=1",
                tags=("React", "Tailwind", "Recharts"),
            ),
            Project(
                id="2",
                title="Task Management App",
                description=(
                    "A collaborative tool to help teams organize and prioritize their "
                    "daily workflow."
                ),
                link="#",
                image_url="https://picsum.photos/600/400?random=2",
                tags=("TypeScript", "Node.js"),
            ),
        ),
    )
