"""Environment-driven settings for calcstate hosts.

Each loader reads an env mapping (os.environ by default) and falls back to
defaults on anything missing or malformed. The core never reads the
environment; hosts resolve settings here and pass them in explicitly.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler

from calcstate.formatter import DEFAULT_CONFIG, FormatterConfig

logger = logging.getLogger(__name__)

SEPARATOR_VAR = "CALCSTATE_GROUP_SEPARATOR"
GROUP_SIZE_VAR = "CALCSTATE_GROUP_SIZE"
LOG_LEVEL_VAR = "CALCSTATE_LOG_LEVEL"


def load_formatter_config(
    env: Optional[Mapping[str, str]] = None,
    separator: Optional[str] = None,
    group_size: Optional[int] = None,
) -> FormatterConfig:
    """Build the grouping config: explicit arguments, then env, then defaults.

    Args:
        env: Environment mapping. Defaults to os.environ.
        separator: Override for the thousands separator.
        group_size: Override for the group size; must be positive.

    Raises:
        ValueError: if an explicit group_size is not positive.
    """
    env = os.environ if env is None else env

    if separator is None:
        separator = env.get(SEPARATOR_VAR, DEFAULT_CONFIG.separator)

    if group_size is None:
        raw = env.get(GROUP_SIZE_VAR)
        group_size = DEFAULT_CONFIG.group_size
        if raw:
            try:
                group_size = int(raw)
                if group_size < 1:
                    raise ValueError(raw)
            except ValueError:
                logger.warning(
                    "Ignoring %s=%r (expected a positive integer)", GROUP_SIZE_VAR, raw
                )
                group_size = DEFAULT_CONFIG.group_size

    return FormatterConfig(separator=separator, group_size=group_size)


def resolve_log_level(
    verbose: bool = False,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """DEBUG when verbose, else CALCSTATE_LOG_LEVEL, else WARNING."""
    if verbose:
        return logging.DEBUG
    env = os.environ if env is None else env
    name = env.get(LOG_LEVEL_VAR, "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level: int, console: Optional[Console] = None) -> None:
    """Route the calcstate loggers through Rich on stderr."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger("calcstate")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
