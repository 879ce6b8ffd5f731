"""Settings for the syx CLI - CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  - CLI flags passed by Typer
  2. Env vars     - ``SYX_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from syxpack.splitter import DanglingPolicy


class SyxSettings(BaseSettings):
    """Unified settings for the syx CLI.

    Attributes:
        dangling: Policy for an F0 without a matching F7.
        receive_dir: Directory for files written by ``syx receive``.
        split_dir: Directory for files written by ``syx split``; CWD if unset.
        debug: Enable DEBUG-level logging.
        log_json: Use the JSON log renderer.
    """

    model_config = SettingsConfigDict(frozen=True, env_prefix="SYX_")

    dangling: DanglingPolicy = DanglingPolicy.DROP
    receive_dir: Path = Field(default_factory=Path.cwd)
    split_dir: Optional[Path] = None
    debug: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> SyxSettings:
        """Construct settings from CLI flags.

        Flags left at ``None`` are dropped so that environment variables
        and defaults still apply.
        """
        return cls(**{k: v for k, v in cli_flags.items() if v is not None})
