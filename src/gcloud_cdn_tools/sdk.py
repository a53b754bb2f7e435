"""Cloud SDK install management."""
import typer
from rich import print as cp
from typing_extensions import Annotated

from gcloud_cdn_tools import runner
from gcloud_cdn_tools.models.settings import EnvSettings
from gcloud_cdn_tools.utils import gcloud_sdk, tool_cache
from gcloud_cdn_tools.utils.cli import assert_exists, attempt

app = typer.Typer(no_args_is_help=True)

VersionType = Annotated[str, typer.Option("--version", "-v")]


@app.command()
def latest():
    """Print the latest published gcloud version."""
    settings = EnvSettings()
    cp(attempt(gcloud_sdk.get_latest_gcloud_sdk_version, settings))


@app.command()
def install(version: VersionType = "latest"):
    """Install a gcloud version into the tool cache."""
    settings = EnvSettings()
    version = attempt(runner.compute_gcloud_version, version, settings)

    if gcloud_sdk.is_installed(version, settings):
        cp(f"gcloud {version} already installed")
    else:
        attempt(gcloud_sdk.install_gcloud_sdk, version, settings)

    tool_root = tool_cache.find(gcloud_sdk.TOOL_NAME, version, root=settings.tool_cache_root)
    typer.echo(f"✅  gcloud {version} at: {str(tool_root)!r}")


@app.command()
def which(version: VersionType = "latest"):
    """Print where a cached gcloud version lives."""
    settings = EnvSettings()
    version = attempt(runner.compute_gcloud_version, version, settings)
    tool_root = tool_cache.find(gcloud_sdk.TOOL_NAME, version, root=settings.tool_cache_root)
    assert_exists(tool_root, msg=f"gcloud {version} is not installed")
    typer.echo(str(tool_root))
