from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .base import JobSourceError, extract_jobs


class FileJobSource:
    """Read jobs from a JSON document on disk."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def fetch(self) -> dict[str, Any]:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError as exc:
            raise JobSourceError(f"Job file not found: {self._path}") from exc
        except json.JSONDecodeError as exc:
            raise JobSourceError(f"Invalid job JSON: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise JobSourceError(f"Job file is not valid UTF-8: {self._path}") from exc
        except OSError as exc:
            raise JobSourceError(f"Cannot read job file {self._path}: {exc.strerror or exc}") from exc
        return {"jobs": extract_jobs(data)}
