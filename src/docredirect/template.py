"""HTML redirect template.

A single placeholder token is substituted with the redirect target URL.
"""

from pathlib import Path

PLACEHOLDER = "_URL_"

DEFAULT_TEMPLATE = """\
<!DOCTYPE HTML>
<html>
<head>
    <meta charset="UTF-8">
    <meta http-equiv="refresh" content="1; url=_URL_">
    <script>
    window.location.href = "_URL_"
    </script>
</head>
<body>
<title>Page Redirection</title>
If you are not redirected automatically, follow <a href="_URL_">this link.</a>
</body>
</html>"""


def render_redirect(target_url: str, template: str = DEFAULT_TEMPLATE) -> str:
    """Render a redirect document pointing at target_url.

    Args:
        target_url: URL the page should redirect to
        template: Template containing the placeholder token

    Returns:
        Template with every placeholder occurrence replaced
    """
    return template.replace(PLACEHOLDER, target_url)


def load_template(path: Path) -> str:
    """Load a custom redirect template from disk.

    Args:
        path: Path to template file

    Returns:
        Template text

    Raises:
        FileNotFoundError: If the template file doesn't exist
        ValueError: If the template has no placeholder
    """
    if not path.exists():
        raise FileNotFoundError(f"Template file not found: {path}")

    template = path.read_text(encoding="utf-8")
    if PLACEHOLDER not in template:
        raise ValueError(f"Template {path} must contain the {PLACEHOLDER} placeholder")
    return template
