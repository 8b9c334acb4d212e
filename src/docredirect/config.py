"""Configuration management for Docredirect.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path, PurePosixPath

CONFIG_FILENAME = "docredirect.toml"

DEFAULT_OUTPUT_DIR = "BookHTML"
DEFAULT_URL_PREFIX = "/php5/"

# Pages published before the book moved under /php5/.
DEFAULT_PATHS: tuple[str, ...] = (
    "introduction.html",
    "build_system.html",
    "classes_objects.html",
    "hashtables.html",
    "introduction.html",
    "zvals.html",
    "build_system/building_extensions.html",
    "build_system/building_php.html",
    "classes_objects/custom_object_storage.html",
    "classes_objects/implementing_typed_arrays.html",
    "classes_objects/internal_structures_and_implementation.html",
    "classes_objects/iterators.html",
    "classes_objects/magic_interfaces_comparable.html",
    "classes_objects/object_handlers.html",
    "classes_objects/serialization.html",
    "classes_objects/simple_classes.html",
    "hashtables/array_api.html",
    "hashtables/basic_structure.html",
    "hashtables/hash_algorithm.html",
    "hashtables/hashtable_api.html",
    "zvals/basic_structure.html",
    "zvals/casts_and_operations.html",
    "zvals/memory_management.html",
)


@dataclass
class RedirectsConfig:
    """Redirect generation configuration."""

    output_dir: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_DIR))
    url_prefix: str = DEFAULT_URL_PREFIX
    template_file: Path | None = None
    paths: list[str] = field(default_factory=lambda: list(DEFAULT_PATHS))


@dataclass
class CliSettings:
    """Command-line overrides applied on top of the configuration file."""

    output_dir: Path | None = None
    url_prefix: str | None = None


@dataclass
class Config:
    """Application configuration."""

    redirects: RedirectsConfig
    config_path: Path | None = None

    @classmethod
    def load(
        cls,
        config_path: Path | None = None,
        cli_settings: CliSettings | None = None,
    ) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for docredirect.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file
            cli_settings: Optional command-line overrides

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            config = cls._load_from_file(config_path)
        else:
            discovered_path = cls._discover_config()
            if discovered_path is None:
                config = cls._default()
            else:
                config = cls._load_from_file(discovered_path)

        if cli_settings is not None:
            config = config._apply_cli_settings(cli_settings)
        return config

    def _apply_cli_settings(self, cli_settings: CliSettings) -> Config:
        redirects = self.redirects
        if cli_settings.output_dir is not None:
            redirects = replace(redirects, output_dir=cli_settings.output_dir)
        if cli_settings.url_prefix is not None:
            redirects = replace(redirects, url_prefix=cli_settings.url_prefix)
        return replace(self, redirects=redirects)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        """Create config with all defaults."""
        return cls(redirects=RedirectsConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        redirects = cls._parse_redirects(data.get("redirects"), path.parent)

        return cls(redirects=redirects, config_path=path)

    @classmethod
    def _parse_redirects(cls, data: object, config_dir: Path) -> RedirectsConfig:
        """Parse redirects configuration section.

        Args:
            data: Raw redirects section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            RedirectsConfig instance
        """
        if data is None:
            return RedirectsConfig(output_dir=config_dir / DEFAULT_OUTPUT_DIR)

        if not isinstance(data, dict):
            raise ValueError("redirects section must be a dictionary")

        output_dir = data.get("output_dir", DEFAULT_OUTPUT_DIR)
        if not isinstance(output_dir, str):
            raise ValueError("redirects.output_dir must be a string")

        url_prefix = data.get("url_prefix", DEFAULT_URL_PREFIX)
        if not isinstance(url_prefix, str):
            raise ValueError("redirects.url_prefix must be a string")

        template_file = data.get("template_file")
        if template_file is not None and not isinstance(template_file, str):
            raise ValueError("redirects.template_file must be a string")

        paths_raw = data.get("paths")
        paths = list(DEFAULT_PATHS)
        if paths_raw is not None:
            if not isinstance(paths_raw, list):
                raise ValueError("redirects.paths must be a list")
            paths = []
            for item in paths_raw:
                if not isinstance(item, str):
                    raise ValueError("redirects.paths items must be strings")
                _validate_relative_path(item)
                paths.append(item)

        return RedirectsConfig(
            output_dir=config_dir / output_dir,
            url_prefix=url_prefix,
            template_file=config_dir / template_file if template_file else None,
            paths=paths,
        )


def _validate_relative_path(path: str) -> None:
    """Reject entries that would escape the output root.

    Raises:
        ValueError: If path is empty, absolute, or not a clean forward-slash path
    """
    if not path:
        raise ValueError("redirects.paths items must not be empty")
    if "\\" in path:
        raise ValueError(f"redirects.paths item must use forward slashes: {path}")
    if path.startswith("/"):
        raise ValueError(f"redirects.paths item must be relative: {path}")
    if ".." in PurePosixPath(path).parts:
        raise ValueError(f"redirects.paths item must not contain '..': {path}")
