"""Tests for redirect template rendering."""

from pathlib import Path

import pytest
from docredirect.template import (
    DEFAULT_TEMPLATE,
    PLACEHOLDER,
    load_template,
    render_redirect,
)

EXPECTED_ARRAY_API = """\
<!DOCTYPE HTML>
<html>
<head>
    <meta charset="UTF-8">
    <meta http-equiv="refresh" content="1; url=/php5/hashtables/array_api.html">
    <script>
    window.location.href = "/php5/hashtables/array_api.html"
    </script>
</head>
<body>
<title>Page Redirection</title>
If you are not redirected automatically, follow <a href="/php5/hashtables/array_api.html">this link.</a>
</body>
</html>"""


class TestRenderRedirect:
    """Tests for render_redirect()."""

    def test__default_template__has_three_placeholders(self) -> None:
        """Placeholder appears at meta-refresh, script, and fallback link."""
        assert DEFAULT_TEMPLATE.count(PLACEHOLDER) == 3

    def test__renders_expected_document(self) -> None:
        """Render the exact redirect document."""
        html = render_redirect("/php5/hashtables/array_api.html")

        assert html == EXPECTED_ARRAY_API

    def test__replaces_every_placeholder(self) -> None:
        """No placeholder survives rendering."""
        html = render_redirect("/php5/zvals.html")

        assert PLACEHOLDER not in html
        assert html.count("/php5/zvals.html") == 3

    def test__custom_template(self) -> None:
        """Substitute into a caller-supplied template."""
        html = render_redirect("/v2/a.html", "go to _URL_ or _URL_")

        assert html == "go to /v2/a.html or /v2/a.html"


class TestLoadTemplate:
    """Tests for load_template()."""

    def test__loads_template_file(self, tmp_path: Path) -> None:
        """Load a template containing the placeholder."""
        template_file = tmp_path / "redirect.html"
        template_file.write_text('<a href="_URL_">moved</a>')

        assert load_template(template_file) == '<a href="_URL_">moved</a>'

    def test__missing_file__raises_error(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for a missing template."""
        with pytest.raises(FileNotFoundError, match="Template file not found"):
            load_template(tmp_path / "missing.html")

    def test__no_placeholder__raises_error(self, tmp_path: Path) -> None:
        """Reject a template without the placeholder."""
        template_file = tmp_path / "redirect.html"
        template_file.write_text("<p>static</p>")

        with pytest.raises(ValueError, match="_URL_"):
            load_template(template_file)
