# -*- coding: utf-8 -*-
"""
Tests for the template renderer.
"""
from datetime import datetime

import pytest

from markclip.config import DEFAULT_FRONTMATTER
from markclip.renderer import TemplateRenderer, coerce_value, has_content, render_template


class TestBasicRendering:
    """Field substitution."""

    def test_page_title(self, sample_article):
        assert render_template("{pageTitle}", sample_article) == "Sample Article Title"

    def test_default_template(self, sample_article):
        """None or empty templates render the page title."""
        assert render_template(None, sample_article) == "Sample Article Title"
        assert render_template("", sample_article) == "Sample Article Title"

    def test_multiple_fields(self, sample_article):
        result = render_template("{byline} - {pageTitle}", sample_article)
        assert result == "John Doe - Sample Article Title"

    def test_transform(self):
        assert render_template("{title:kebab}", {"title": "Hello World"}) == "hello-world"

    def test_escaped_braces(self):
        result = render_template("\\{pageTitle\\} {pageTitle}", {"pageTitle": "T"})
        assert result == "{pageTitle} T"

    def test_unknown_field_is_empty(self):
        assert render_template("{missing} - {pageTitle}", {"pageTitle": "T"}) == " - T"

    def test_unknown_transform_is_empty(self):
        assert render_template("{pageTitle:reverse} x1", {"pageTitle": "T"}) == " x1"

    def test_extra_fields(self):
        """Any metadata key can be used as a placeholder."""
        assert render_template("{siteName}", {"siteName": "Example Site"}) == "Example Site"

    def test_unicode_title(self):
        assert render_template("{pageTitle}", {"pageTitle": "日本語のタイトル"}) == "日本語のタイトル"

    def test_value_coercion(self):
        metadata = {"count": 3, "flag": True, "tags": ["a", "b"], "empty": None}
        assert render_template("{count} {flag} {tags}{empty}", metadata) == "3 true a,b"


class TestFallback:
    """Results without alphanumeric content fall back to a title."""

    def test_page_title_fallback(self):
        assert render_template("{missing}", {"pageTitle": "PT", "title": "T"}) == "PT"

    def test_title_fallback(self):
        assert render_template("{missing}", {"pageTitle": "  ", "title": "T"}) == "T"

    def test_download_fallback(self):
        assert render_template("{missing}", {}) == "download"

    def test_punctuation_only_result(self):
        assert render_template("--- {missing} ---", {"pageTitle": "PT"}) == "PT"

    def test_none_metadata(self):
        assert render_template("{pageTitle}", None) == "download"

    def test_fallback_is_sanitized(self):
        """A page title made only of script falls through to the next candidate."""
        assert render_template("{missing}", {"pageTitle": "<script>a()</script>"}) == "download"

    def test_content_is_never_substituted(self, sample_article):
        assert render_template("{content}x1", sample_article) == "x1"
        assert render_template("{content}", sample_article) == "Sample Article Title"


class TestSpecialPlaceholders:
    """date, keywords and domain."""

    def test_date_format(self, capture_time):
        assert render_template("{date:YYYY-MM-DD}", {}, now=capture_time) == "2024-01-15"

    def test_default_date(self, capture_time):
        assert render_template("{date}", {}, now=capture_time) == "2024-01-15T10:30:00+00:00"

    def test_date_with_colons(self, capture_time):
        assert render_template("{date:HH:mm}", {}, now=capture_time) == "10:30"

    def test_naive_now(self):
        """A naive timestamp is read as local time."""
        assert render_template("{date:YYYY-MM-DD HH:mm}", {}, now=datetime(2024, 1, 15, 10, 30)) == "2024-01-15 10:30"

    def test_keywords(self, sample_article):
        assert render_template("{keywords}", sample_article) == "javascript, testing, tutorial"

    def test_keywords_custom_separator(self, sample_article):
        assert render_template("{keywords: }", sample_article) == "javascript testing tutorial"
        assert render_template("{keywords:\\n}", sample_article) == "javascript\ntesting\ntutorial"

    def test_keywords_string_value(self):
        assert render_template("{keywords}", {"keywords": "a;b"}) == "a;b"

    def test_domain(self, sample_article):
        assert render_template("{domain}", sample_article) == "example.com"

    def test_domain_with_transform(self, sample_article):
        """Transforms apply to the hostname taken from baseURI."""
        assert render_template("{domain:upper}", sample_article) == "EXAMPLE.COM"
        assert render_template("{domain:kebab}", {"baseURI": "https://News.Site.org/a"}) == "news.site.org"

    def test_default_frontmatter(self, sample_article, capture_time):
        result = render_template(DEFAULT_FRONTMATTER, sample_article, now=capture_time)
        assert result == (
            "---\n"
            "created: 2024-01-15T10:30:00 (UTC +00:00)\n"
            "tags: [javascript, testing, tutorial]\n"
            "source: https://example.com/path/article\n"
            "author: John Doe\n"
            "---\n"
            "\n"
            "# Sample Article Title\n"
            "\n"
            "> ## Excerpt\n"
            "> A short excerpt.\n"
            "\n"
            "---"
        )


class TestSanitization:
    """Substituted values are filtered."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("<script>alert(1)</script>Safe", "Safe"),
            ("javascript:Title", "Title"),
            ('Title <b onmouseover="x()">', "Title <b >"),
        ],
    )
    def test_values_sanitized(self, title, expected):
        assert render_template("{pageTitle}", {"pageTitle": title}) == expected

    def test_transformed_values_sanitized(self):
        assert render_template("{pageTitle:lower}", {"pageTitle": "<SCRIPT>x</SCRIPT>OK"}) == "ok"

    def test_nested_payload_removed(self):
        """A script block rebuilt by removing an inner block is removed too."""
        metadata = {"pageTitle": "<scr<script>x</script>ipt>alert(1)</script>", "title": "Fallback"}
        assert render_template("{pageTitle}", metadata) == "Fallback"
        assert render_template("Go {pageTitle}", {"pageTitle": "javajavascript:script:x1"}) == "Go x1"

    def test_unquoted_handler_removed(self):
        assert render_template("{pageTitle}", {"pageTitle": "<a onclick=alert(1)>T</a>"}) == "<a>T</a>"


class TestHelpers:
    """coerce_value and has_content."""

    def test_coerce_nested_list(self):
        assert coerce_value(["a", ["b", "c"], None]) == "a,b,c,"

    def test_has_content(self):
        assert has_content("a")
        assert has_content("é")
        assert not has_content("- _ !")

    def test_renderer_instance(self, capture_time):
        renderer = TemplateRenderer()
        assert renderer.render("{date:YYYY}", {}, now=capture_time) == "2024"
