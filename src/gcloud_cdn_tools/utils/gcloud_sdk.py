"""Cloud SDK provisioning: version lookup, installs, components and auth."""
from __future__ import annotations

import platform
import shutil
import tarfile
import zipfile
from pathlib import Path
from tempfile import TemporaryDirectory

import httpx
from rich.progress import Progress

from gcloud_cdn_tools.errors import AuthenticationError, ProvisioningError
from gcloud_cdn_tools.models.settings import EnvSettings
from gcloud_cdn_tools.utils import actions, tool_cache, uris
from gcloud_cdn_tools.utils.gcloud_process import GcloudProcess, get_tool_command

__all__ = [
    "get_tool_command",
    "get_latest_gcloud_sdk_version",
    "is_installed",
    "install_gcloud_sdk",
    "install_component",
    "authenticate_gcloud_sdk",
]

TOOL_NAME = "gcloud"
COMPONENTS_MANIFEST = "components-2.json"
CHUNK_SIZE = 1024 * 1024


def get_latest_gcloud_sdk_version(settings: EnvSettings | None = None) -> str:
    """Ask the release channel for the current Cloud SDK version."""
    settings = settings or EnvSettings()
    url = uris.join(settings.gcloud_release_url, COMPONENTS_MANIFEST)

    try:
        res = httpx.get(url, headers={"Cache-Control": "no-cache"}, follow_redirects=True)
        res.raise_for_status()
        version = res.json().get("version")
    except (httpx.HTTPError, ValueError, AttributeError) as e:
        raise ProvisioningError(f"failed to retrieve latest gcloud version from {url}: {e}") from e

    if not version:
        raise ProvisioningError(f"no version found in {url}")
    return str(version)


def is_installed(version: str | None = None, settings: EnvSettings | None = None) -> bool:
    """Whether gcloud (optionally a specific version) is available."""
    if not version:
        return shutil.which(get_tool_command()) is not None

    settings = settings or EnvSettings()
    return tool_cache.find(TOOL_NAME, version, root=settings.tool_cache_root) is not None


def archive_platform() -> tuple[str, str]:
    """(os, arch) as they appear in release archive names."""
    system = platform.system().lower()
    if system not in ("linux", "darwin", "windows"):
        raise ProvisioningError(f"unsupported platform: {platform.system()}")

    machine = platform.machine().lower()
    if machine in ("x86_64", "amd64"):
        arch = "x86_64"
    elif machine in ("aarch64", "arm64"):
        arch = "arm"
    elif machine in ("i386", "i686", "x86"):
        arch = "x86"
    else:
        raise ProvisioningError(f"unsupported architecture: {platform.machine()}")

    return system, arch


def download_url(version: str, settings: EnvSettings) -> str:
    os_name, arch = archive_platform()
    return uris.join(
        settings.gcloud_release_url,
        "downloads",
        uris.sdk_archive_name(version, os_name, arch),
    )


def download_archive(url: str, dest_dir: Path) -> Path:
    """Stream a release archive to disk with a progress bar."""
    file_name = url.split("/")[-1]
    target = Path(dest_dir, file_name)

    with httpx.stream("GET", url, follow_redirects=True) as r:
        r.raise_for_status()
        total = int(r.headers.get("Content-Length", 0)) or None

        with Progress(transient=True) as pbar, target.open("wb") as f:
            task = pbar.add_task(f"Downloading {file_name}...", total=total)
            for chunk in r.iter_bytes(CHUNK_SIZE):
                f.write(chunk)
                pbar.update(task, advance=len(chunk))

    return target


def extract_archive(archive: Path, dest_dir: Path) -> Path:
    dest_dir.mkdir(parents=True, exist_ok=True)
    if archive.name.endswith(".zip"):
        with zipfile.ZipFile(archive) as zf:
            zf.extractall(dest_dir)
    else:
        with tarfile.open(archive, "r:gz") as tf:
            tf.extractall(dest_dir, filter="data")
    return dest_dir


def install_gcloud_sdk(version: str, settings: EnvSettings | None = None) -> Path:
    """Download, extract and cache a Cloud SDK release, then put it on PATH."""
    settings = settings or EnvSettings()
    url = download_url(version, settings)
    actions.info(f"Installing gcloud {version}")
    actions.debug(f"Downloading {url}")

    try:
        with TemporaryDirectory(dir=settings.temp_root) as temp_dir:
            archive = download_archive(url, Path(temp_dir))
            extracted = extract_archive(archive, Path(temp_dir, "extract"))
            tool_root = tool_cache.cache_dir(
                extracted / "google-cloud-sdk",
                TOOL_NAME,
                version,
                root=settings.tool_cache_root,
            )
    except (httpx.HTTPError, OSError, tarfile.TarError, zipfile.BadZipFile) as e:
        raise ProvisioningError(f"failed to install gcloud {version}: {e}") from e

    actions.add_path(tool_root / "bin", settings.github_path)
    return tool_root


def install_component(component: str) -> None:
    """Install an extra gcloud component such as ``alpha``."""
    GcloudProcess(silent=True).check_cmd(
        "--quiet", "components", "install", str(component),
        error_type=ProvisioningError,
    )


def authenticate_gcloud_sdk(cred_file: str) -> None:
    """Log gcloud in with a credentials file written by the auth step."""
    GcloudProcess(silent=True).check_cmd(
        "--quiet", "auth", "login", "--force", "--cred-file", cred_file,
        error_type=AuthenticationError,
    )
