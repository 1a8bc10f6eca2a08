"""Load build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from styleguide_pages._constants import (
    DEFAULT_CHILD_HEADING_TAG,
    DEFAULT_PARENT_HEADING_TAG,
)

from .models import BuildConfig, ConfigError

REQUIRED_KEYS = {
    "source": "No source directory specified in the config file",
    "destination": "No destination directory specified in the config",
    "documentation_assets": "No documentation assets directory specified",
}


def load_build_config(path: Path) -> BuildConfig:
    """Load the YAML configuration describing a style guide build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``styleguide_config.yml``). Relative directories inside the file are
        resolved against the file's own directory.

    Returns
    -------
    BuildConfig
        Parsed configuration with defaults applied for heading tags, the
        Pygments style, and optional lists.

    Raises
    ------
    ConfigError
        If the file is missing or unparsable, is not a mapping, or lacks one of
        ``source``, ``destination``, or ``documentation_assets``.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_build_config(Path("styleguide_config.yml"))  # doctest: +SKIP
    >>> config.parent_heading_tag  # doctest: +SKIP
    'h1'
    """
    if not path.is_file():
        msg = (
            f"Could not load config file '{path}', try 'styleguide init' to get "
            "started"
        )
        raise ConfigError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Could not parse config file '{path}': {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    for key, message in REQUIRED_KEYS.items():
        if not raw.get(key):
            raise ConfigError(message)

    base_dir = path.resolve().parent
    index = raw.get("index")
    return BuildConfig(
        source=_resolve_path(base_dir, raw["source"]),
        destination=_resolve_path(base_dir, raw["destination"]),
        documentation_assets=_resolve_path(base_dir, raw["documentation_assets"]),
        index=str(index) if index else None,
        parent_heading_tag=str(
            raw.get("parent_heading_tag") or DEFAULT_PARENT_HEADING_TAG
        ),
        child_heading_tag=str(raw.get("child_heading_tag") or DEFAULT_CHILD_HEADING_TAG),
        dependencies=[
            _resolve_path(base_dir, entry) for entry in _as_list(raw.get("dependencies"))
        ],
        markdown_extensions=[
            str(entry) for entry in _as_list(raw.get("markdown_extensions"))
        ],
        pygments_style=str(raw.get("pygments_style") or "monokai"),
    )


def _resolve_path(base_dir: Path, value: object) -> Path:
    """Return ``value`` as a path, anchored at ``base_dir`` when relative."""
    candidate = Path(str(value)).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _as_list(value: object) -> list[object]:
    """Normalize a scalar-or-list config value into a list without empties."""
    match value:
        case None:
            return []
        case list():
            return [entry for entry in value if entry not in (None, "")]
        case _:
            return [value]


__all__ = ["load_build_config"]
