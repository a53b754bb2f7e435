"""Cloud CDN cache tools."""
from typing import Optional

import typer
from rich import print as cp
from typing_extensions import Annotated

from gcloud_cdn_tools import runner
from gcloud_cdn_tools.models.inputs import InvocationInputs
from gcloud_cdn_tools.models.settings import EnvSettings
from gcloud_cdn_tools.utils.cli import attempt

app = typer.Typer(no_args_is_help=True)


@app.command()
def invalidate(
    load_balancer_name: str,
    path: str,
    host: Annotated[Optional[str], typer.Option("--host")] = None,
    gcloud_version: Annotated[str, typer.Option("--gcloud-version")] = "latest",
    component: Annotated[Optional[str], typer.Option("--component", help="alpha or beta")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run")] = False,
):
    """Invalidate a path in a load balancer's CDN cache."""
    inputs = attempt(
        InvocationInputs.create, load_balancer_name, path, host, gcloud_version, component
    )

    if dry_run:
        cp(f"Would run: gcloud {' '.join(runner.preview_command(inputs))}")
        raise typer.Exit()

    settings = EnvSettings()
    typer.echo(f"Invalidating {path!r} on {load_balancer_name!r}...")
    attempt(runner.invalidate, inputs, settings)
    typer.echo(f"✅  Invalidated {path!r}")
