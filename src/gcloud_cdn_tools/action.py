"""GitHub Actions entry point."""
import typer

from gcloud_cdn_tools import runner
from gcloud_cdn_tools.errors import error_message
from gcloud_cdn_tools.models.inputs import InvocationInputs
from gcloud_cdn_tools.models.settings import EnvSettings
from gcloud_cdn_tools.utils import actions

ACTION_NAME = "gcloud-cdn-tools"

app = typer.Typer(no_args_is_help=True)


@app.command()
def run():
    """Invalidate a CDN cache from the step's INPUT_* variables."""
    try:
        settings = EnvSettings()
        inputs = InvocationInputs.from_action_inputs()
        runner.invalidate(inputs, settings)
    except Exception as e:
        actions.set_failed(f"{ACTION_NAME} failed with: {error_message(e)}")
        raise typer.Exit(1)
