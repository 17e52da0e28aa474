"""Display settings for calcpad, read from the environment.

Self-contained — no config files. Unset variables fall back to the defaults
the original keypad app showed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_ERROR_TEXT = "Error"
DEFAULT_ZERO_TEXT = "0"


@dataclass(frozen=True)
class Settings:
    """Texts the reducer writes to the primary display line."""

    error_text: str = DEFAULT_ERROR_TEXT
    zero_text: str = DEFAULT_ZERO_TEXT

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from CALCPAD_* variables.

        Args:
            env: Mapping to read from. Defaults to os.environ.
        """
        env = os.environ if env is None else env
        return cls(
            error_text=env.get("CALCPAD_ERROR_TEXT", DEFAULT_ERROR_TEXT),
            zero_text=env.get("CALCPAD_ZERO_TEXT", DEFAULT_ZERO_TEXT),
        )
