"""Library settings -- read from the environment and an optional ``.env`` file.

The process environment wins over the ``.env`` file, which lets callers
override a shared file per process.
"""

from __future__ import annotations

import logging
import os

from ..util.env_file import EnvFile
from ..util.singletons import register_singleton

logger = logging.getLogger(__name__)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class Settings:
    """Serialization and reply defaults for the schema models."""

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-read the ``.env`` file and environment variables."""
        self.env = EnvFile(os.getenv("DOTENV_PATH") or ".env")
        e = self._read

        self.serialize_exclude_none: bool = _parse_bool(
            "BOTSCHEMA_EXCLUDE_NONE", e("BOTSCHEMA_EXCLUDE_NONE"), default=True,
        )
        self.default_locale: str | None = e("BOTSCHEMA_DEFAULT_LOCALE") or None

        raw_indent = e("BOTSCHEMA_JSON_INDENT")
        try:
            self.json_indent: int | None = int(raw_indent) if raw_indent else None
        except ValueError:
            raise ValueError(f"BOTSCHEMA_JSON_INDENT must be an integer, got {raw_indent!r}") from None

        logger.debug(
            "Settings loaded: exclude_none=%s default_locale=%s json_indent=%s",
            self.serialize_exclude_none, self.default_locale, self.json_indent,
        )

    # -- helpers -----------------------------------------------------------

    def _read(self, key: str) -> str:
        return os.getenv(key) or self.env.read(key)


def _parse_bool(key: str, raw: str, *, default: bool) -> bool:
    if not raw:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean flag, got {raw!r}")


# Module-level singleton
cfg = Settings()


@register_singleton
def _reset_cfg() -> None:
    cfg.reload()
