"""Tests for HTML and CSS escaping helpers."""

from __future__ import annotations

from portfolio_builder.utils.markup import (
    css_background_image,
    css_url,
    css_value,
    escape_html,
    is_css_gradient,
)


class TestEscapeHtml:
    def test_escapes_markup_and_quotes(self) -> None:
        assert escape_html('<a href="x">&\'') == "&lt;a href=&quot;x&quot;&gt;&amp;&#x27;"

    def test_none_becomes_empty(self) -> None:
        assert escape_html(None) == ""

    def test_plain_text_unchanged(self) -> None:
        assert escape_html("Senior Engineer, UI/UX") == "Senior Engineer, UI/UX"


class TestCssValue:
    def test_strips_breakout_characters(self) -> None:
        assert css_value("red;}</style><script>") == "red/stylescript"

    def test_keeps_hex_colors(self) -> None:
        assert css_value("#4f46e5") == "#4f46e5"

    def test_keeps_gradients(self) -> None:
        value = "linear-gradient(45deg, #ff0000 0%, rgba(0,0,0,0.5) 100%)"
        assert css_value(value) == value


class TestCssUrl:
    def test_encodes_quotes_parens_and_spaces(self) -> None:
        assert css_url("https://x.com/a b'c)") == "https://x.com/a%20b%27c%29"

    def test_keeps_query_strings(self) -> None:
        url = "https://picsum.photos/600/400?random=1&blur=2"
        assert css_url(url) == url


class TestBackgroundImage:
    def test_gradient_detection_is_case_insensitive(self) -> None:
        assert is_css_gradient("  Linear-Gradient(red, blue)")
        assert is_css_gradient("radial-gradient(circle, red, blue)")
        assert not is_css_gradient("https://x.test/gradient.png")

    def test_url_wrapped(self) -> None:
        assert css_background_image("https://x/y.png") == "url('https://x/y.png')"

    def test_gradient_passed_through(self) -> None:
        value = "conic-gradient(red, blue)"
        assert css_background_image(value) == value
