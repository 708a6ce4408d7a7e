"""Local JSON artifact storage."""

import json
from pathlib import Path
from typing import Any

from privaudit.infrastructure.logging.logger import get_app_logger

PROOF_ARTIFACT_NAME = "solvency-proof.json"
DEMO_REPORT_NAME = "demo-report.json"
DEMO_PDF_NAME = "demo-report.pdf"


class JsonArtifactStore:
    """Store JSON and binary artifacts under a single directory."""

    def __init__(self, base_dir: Path | str, logger=None) -> None:
        self._base_dir = Path(base_dir)
        self._logger = logger or get_app_logger()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, name: str) -> Path:
        return self._base_dir / name

    def save(self, name: str, payload: dict[str, Any]) -> Path:
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, indent=2, default=str),
            encoding="utf-8",
        )
        self._logger.info(f"Artifact written to {path}")
        return path

    def save_bytes(self, name: str, content: bytes) -> Path:
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        self._logger.info(f"Artifact written to {path}")
        return path

    def load(self, name: str) -> dict[str, Any]:
        """Return a saved JSON artifact.

        Raises:
            FileNotFoundError: If the artifact does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
        """
        path = self.path_for(name)
        return json.loads(path.read_text(encoding="utf-8"))


__all__ = [
    "JsonArtifactStore",
    "PROOF_ARTIFACT_NAME",
    "DEMO_REPORT_NAME",
    "DEMO_PDF_NAME",
]
