"""GitHub Actions workflow commands and step inputs."""
from __future__ import annotations

import os
from pathlib import Path

import typer

from gcloud_cdn_tools.errors import ConfigurationError

__all__ = [
    "get_input",
    "parse_boolean",
    "debug",
    "info",
    "warning",
    "error",
    "set_failed",
    "add_path",
]

_TRUTHY = {"true", "t", "1", "yes", "y"}
_FALSY = {"false", "f", "0", "no", "n"}


def parse_boolean(value: str | None, default: bool = False) -> bool:
    """Parse a boolean flag the way runners set them.

    Empty means ``default``. Anything outside the known true and false
    spellings raises ConfigurationError rather than silently meaning False.
    """
    if value is None:
        return default
    value = str(value).strip().lower()
    if not value:
        return default
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"invalid boolean value {value!r}")


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, message: str = "") -> None:
    typer.echo(f"::{command}::{escape_data(message)}")


def get_input(name: str, required: bool = False, trim: bool = True) -> str:
    """Get a step input from its ``INPUT_<NAME>`` variable."""
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    value = os.environ.get(key, "")
    if required and not value.strip():
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value.strip() if trim else value


def debug(message: str) -> None:
    issue_command("debug", message)


def info(message: str) -> None:
    typer.echo(message)


def warning(message: str) -> None:
    issue_command("warning", message)


def error(message: str) -> None:
    issue_command("error", message)


def set_failed(message: str) -> None:
    """Report the step as failed. Callers still exit non-zero."""
    error(message)


def add_path(directory: str | Path, github_path: str | Path | None = None) -> None:
    """Prepend a directory to PATH for this process and later steps."""
    directory = str(directory)
    github_path = github_path or os.environ.get("GITHUB_PATH")

    if github_path:
        with open(github_path, "a", encoding="utf-8") as f:
            f.write(f"{directory}\n")
    else:
        issue_command("add-path", directory)

    current = os.environ.get("PATH", "")
    os.environ["PATH"] = f"{directory}{os.pathsep}{current}" if current else directory
