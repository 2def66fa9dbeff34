"""Read ``KEY=value`` defaults from ``.env`` style files."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "
_QUOTES = "'\""


class DotenvLoader:
    """Parses the subset of dotenv syntax the applet settings need."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Collect assignments from ``path``; a missing file yields no defaults.

        Raises:
            ConfigurationError: If the file exists but cannot be read
        """
        if not path.exists():
            return {}
        try:
            text = path.read_text()
        except OSError as exc:
            raise ConfigurationError(f"Failed to load configuration from {path}") from exc

        values: Dict[str, str] = {}
        for raw_line in text.splitlines():
            parsed = DotenvLoader.parse_line(raw_line)
            if parsed is not None:
                key, value = parsed
                values[key] = value
        return values

    @staticmethod
    def parse_line(raw_line: str) -> Optional[Tuple[str, str]]:
        """Return ``(key, value)`` for an assignment line, ``None`` for blanks and comments."""
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            return None

        key, _, value = line.partition("=")
        key = key.strip()
        if key.startswith(_EXPORT_PREFIX):
            key = key[len(_EXPORT_PREFIX) :].strip()
        if not key:
            return None
        return key, value.strip().strip(_QUOTES)
