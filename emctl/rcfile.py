"""The user's run-control file holding the default server address."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

__all__ = ["RCFileError", "RCFile", "default_rcfile"]

RCFILE_NAME = ".emctlrc"


class RCFileError(Exception):
    """Raised when the rc file cannot be located, written or read."""


@dataclass
class RCFile:
    """Contents and location of an rc file."""

    path: str | os.PathLike[str] = ""
    server: str = ""

    def save(self) -> None:
        """Write the contents to the rc file."""
        text = yaml.safe_dump({"server": self.server}, default_flow_style=False)
        try:
            with open(self.path, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise RCFileError(f"write file {self.path} failed: {exc}") from exc

    def load(self) -> None:
        """Read the contents from the rc file."""
        try:
            with open(self.path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise RCFileError(f"read file {self.path} failed: {exc}") from exc

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise RCFileError(f"unmarshal {text!r} to yaml failed: {exc}") from exc

        if data is None:
            return
        if not isinstance(data, dict):
            raise RCFileError(f"unmarshal {text!r} to yaml failed: not a mapping")

        server = data.get("server")
        if server is None:
            return
        if isinstance(server, (dict, list)):
            raise RCFileError(f"unmarshal {text!r} to yaml failed: server is not a string")
        self.server = str(server)


def default_rcfile() -> RCFile:
    """Return an RCFile located in the user's home directory."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise RCFileError(f"get user home dir failed: {exc}") from exc
    return RCFile(path=home / RCFILE_NAME)