from gcloud_cdn_tools import action, cdn, config, sdk
import typer

app = typer.Typer(no_args_is_help=True)
app.add_typer(action.app, name="action")
app.add_typer(cdn.app, name="cdn")
app.add_typer(sdk.app, name="sdk")
app.add_typer(config.app, name="config")
