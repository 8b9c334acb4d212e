"""Redirect page generator.

Writes one HTML redirect page per relative path under an output root:

    BookHTML/
    ├── introduction.html        # -> /php5/introduction.html
    └── hashtables/
        └── array_api.html       # -> /php5/hashtables/array_api.html
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from docredirect.config import DEFAULT_PATHS, Config
from docredirect.template import DEFAULT_TEMPLATE, load_template, render_redirect

logger = logging.getLogger(__name__)


def target_url(url_prefix: str, path: str) -> str:
    """Compute the redirect target for a relative document path."""
    return url_prefix + path


@dataclass(frozen=True)
class RedirectPage:
    """A single redirect page to write."""

    path: str
    output_file: Path
    target_url: str


@dataclass
class GenerationResult:
    """Result of a generation run."""

    pages: list[RedirectPage] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of pages written, duplicates included."""
        return len(self.pages)


class RedirectGenerator:
    """Generates HTML redirect pages for relocated documents.

    Every run overwrites existing output files, so repeated runs
    produce byte-identical results.
    """

    def __init__(
        self,
        output_root: Path,
        url_prefix: str,
        paths: Iterable[str] = DEFAULT_PATHS,
        template: str = DEFAULT_TEMPLATE,
    ) -> None:
        """Initialize generator.

        Args:
            output_root: Directory the redirect pages are written under
            url_prefix: Prefix prepended to each path to form the target URL
            paths: Relative document paths, processed in order
            template: Redirect template containing the placeholder token
        """
        self._output_root = output_root
        self._url_prefix = url_prefix
        self._paths = tuple(paths)
        self._template = template

    @classmethod
    def from_config(cls, config: Config) -> RedirectGenerator:
        """Create generator from application config.

        Raises:
            FileNotFoundError: If the configured template file doesn't exist
            ValueError: If the configured template has no placeholder
        """
        redirects = config.redirects
        template = DEFAULT_TEMPLATE
        if redirects.template_file is not None:
            template = load_template(redirects.template_file)
        return cls(
            output_root=redirects.output_dir,
            url_prefix=redirects.url_prefix,
            paths=redirects.paths,
            template=template,
        )

    @property
    def output_root(self) -> Path:
        return self._output_root

    @property
    def url_prefix(self) -> str:
        return self._url_prefix

    def plan(self) -> list[RedirectPage]:
        """Compute every page without touching the file system."""
        return [
            RedirectPage(
                path=path,
                output_file=self._output_root / path,
                target_url=target_url(self._url_prefix, path),
            )
            for path in self._paths
        ]

    def generate(self) -> GenerationResult:
        """Write all redirect pages.

        Returns:
            GenerationResult listing the pages written

        Raises:
            OSError: If a directory or file can't be created. Pages already
                written are left in place.
        """
        result = GenerationResult()
        for page in self.plan():
            try:
                self._write(page)
            except OSError as e:
                logger.error(f"Failed to write redirect for {page.path}: {e}")
                raise
            result.pages.append(page)

        logger.info(f"Wrote {result.count} redirect pages to {self._output_root}")
        return result

    def _write(self, page: RedirectPage) -> None:
        page.output_file.parent.mkdir(parents=True, exist_ok=True)
        page.output_file.write_text(
            render_redirect(page.target_url, self._template),
            encoding="utf-8",
        )
        logger.debug(f"{page.output_file} -> {page.target_url}")
