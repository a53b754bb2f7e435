"""Configuration"""
import rich
import typer

from gcloud_cdn_tools.models.settings import EnvSettings

app = typer.Typer(no_args_is_help=True)


@app.command()
def show():
    """Show the effective environment settings."""
    settings = EnvSettings()
    rich.print_json(settings.model_dump_json())
    rich.print(f"debug: {settings.debug}")
    rich.print(f"tool cache: {settings.tool_cache_root}")
