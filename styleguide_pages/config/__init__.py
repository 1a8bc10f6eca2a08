"""Load and validate the YAML configuration for style guide builds.

The primary entry point is :func:`load_build_config`, which checks that the
source, destination, and documentation assets directories are named, applies
defaults for heading tags and rendering options, and returns a
:class:`BuildConfig` ready for :class:`~styleguide_pages.builder.StyleguideBuilder`.

Examples
--------
>>> from pathlib import Path
>>> from styleguide_pages.config import load_build_config
>>> config = load_build_config(Path("styleguide_config.yml"))  # doctest: +SKIP
>>> config.destination.name  # doctest: +SKIP
'docs'
"""

from .loader import load_build_config
from .models import BuildConfig, ConfigError

__all__ = ["BuildConfig", "ConfigError", "load_build_config"]
