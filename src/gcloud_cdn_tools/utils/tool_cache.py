"""Versioned tool installs on the runner, laid out as
``<root>/<tool>/<version>/<arch>`` with an ``<arch>.complete`` marker."""
from __future__ import annotations

import platform
import shutil
from pathlib import Path

from gcloud_cdn_tools.errors import ConfigurationError
from gcloud_cdn_tools.models.settings import EnvSettings
from gcloud_cdn_tools.models.version import Version

_ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
}


def current_arch() -> str:
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)


def _root(root: Path | None) -> Path:
    return Path(root) if root else EnvSettings().tool_cache_root


def _is_range(version_spec: str) -> bool:
    return version_spec[:1] in ("<", ">", "=", "!")


def _complete(version_dir: Path, arch: str) -> Path | None:
    tool_path = version_dir / arch
    if tool_path.is_dir() and (version_dir / f"{arch}.complete").is_file():
        return tool_path
    return None


def find_all_versions(tool: str, arch: str | None = None, root: Path | None = None) -> list[Version]:
    """All cached semver versions of a tool, lowest first."""
    arch = arch or current_arch()
    tool_dir = _root(root) / tool
    if not tool_dir.is_dir():
        return []

    versions = []
    for child in tool_dir.iterdir():
        version = Version.try_parse(child.name)
        if version is not None and _complete(child, arch):
            versions.append(version)
    return sorted(versions)


def find(tool: str, version_spec: str, arch: str | None = None, root: Path | None = None) -> Path | None:
    """Find a cached tool directory.

    Explicit versions (and anything that is not a comparator expression) are
    looked up verbatim. Comparators such as ``>=400.0.0`` pick the highest
    cached version that matches.
    """
    if not tool or not version_spec:
        return None
    version_spec = version_spec.strip()
    arch = arch or current_arch()
    tool_dir = _root(root) / tool

    if not _is_range(version_spec):
        return _complete(tool_dir / version_spec, arch)

    try:
        matches = [v for v in find_all_versions(tool, arch, root) if v.match(version_spec)]
    except ValueError as e:
        raise ConfigurationError(f"invalid version spec {version_spec!r}: {e}") from e

    if not matches:
        return None
    return _complete(tool_dir / str(matches[-1]), arch)


def cache_dir(source: str | Path, tool: str, version: str, arch: str | None = None, root: Path | None = None) -> Path:
    """Copy a directory into the tool cache and mark it complete."""
    source = Path(source)
    if not source.is_dir():
        raise NotADirectoryError(f"{source} is not a directory")

    arch = arch or current_arch()
    version_dir = _root(root) / tool / version
    tool_path = version_dir / arch
    marker = version_dir / f"{arch}.complete"

    # A partial copy from an earlier run is not trusted
    marker.unlink(missing_ok=True)
    if tool_path.exists():
        shutil.rmtree(tool_path)

    tool_path.parent.mkdir(parents=True, exist_ok=True)
    shutil.copytree(source, tool_path, symlinks=True)
    marker.write_text("")
    return tool_path
