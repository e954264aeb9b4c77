"""
Installation metadata written by the installer.

The installer records the platform release it laid down in a small JSON
document. The controller only needs the version string, which it compares by
equality against its own version.
"""

import json
from pathlib import Path
from typing import Any

from yba_ctl.exceptions import MetadataError


class InstallationMetadata:
    """Reader for the installer's ``version_metadata.json``."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> dict[str, Any]:
        """Load the raw metadata document.

        Raises:
            MetadataError: If the file is missing, unreadable or not a JSON object
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise MetadataError(f"installation metadata not found at {self.path}") from e
        except OSError as e:
            raise MetadataError(f"could not read {self.path}: {e.strerror or e}") from e
        except json.JSONDecodeError as e:
            raise MetadataError(f"invalid installation metadata in {self.path}: {e.msg}") from e

        if not isinstance(data, dict):
            raise MetadataError(f"invalid installation metadata in {self.path}")
        return data

    def installed_version(self) -> str:
        """Return the installed platform version.

        The version is ``version_number``, suffixed with ``-<build_number>``
        when the installer recorded a build.
        """
        data = self.load()
        version = data.get("version_number")
        if not isinstance(version, str) or not version.strip():
            raise MetadataError(f"version_number missing from {self.path}")

        build = data.get("build_number")
        if build is not None and str(build).strip():
            return f"{version.strip()}-{str(build).strip()}"
        return version.strip()
