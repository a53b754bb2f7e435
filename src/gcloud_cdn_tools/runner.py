"""Invalidation runner.

Resolves the gcloud version, makes sure gcloud (and an optional alpha/beta
component) is installed, authenticates with the credentials file left by
``google-github-actions/auth`` and runs::

    gcloud [component] compute url-maps invalidate-cdn-cache LB --path PATH [--host HOST]

Every step blocks until it is done. Nothing is retried.
"""
from __future__ import annotations

import json

from gcloud_cdn_tools.errors import ExecutionError
from gcloud_cdn_tools.models.inputs import InvocationInputs
from gcloud_cdn_tools.models.settings import EnvSettings
from gcloud_cdn_tools.utils import actions, gcloud_sdk, tool_cache
from gcloud_cdn_tools.utils.gcloud_process import ExecOutput, GcloudProcess

INVALIDATE_CDN_CACHE = ("compute", "url-maps", "invalidate-cdn-cache")


def compute_gcloud_version(value: str | None, settings: EnvSettings | None = None) -> str:
    """Explicit version, or the latest one when empty or ``latest``."""
    value = (value or "").strip()
    if value in ("", "latest"):
        return gcloud_sdk.get_latest_gcloud_sdk_version(settings)
    return value


def build_command(inputs: InvocationInputs) -> list[str]:
    cmd = [*INVALIDATE_CDN_CACHE, inputs.load_balancer_name, "--path", inputs.path]
    if inputs.host:
        cmd.extend(["--host", inputs.host])
    return cmd


def preview_command(inputs: InvocationInputs) -> list[str]:
    """The arguments a run would use, component included."""
    cmd = build_command(inputs)
    if inputs.gcloud_component:
        cmd.insert(0, inputs.gcloud_component.value)
    return cmd


def ensure_gcloud(version: str, settings: EnvSettings) -> None:
    if not gcloud_sdk.is_installed(version, settings):
        gcloud_sdk.install_gcloud_sdk(version, settings)
        return

    tool_root = tool_cache.find(gcloud_sdk.TOOL_NAME, version, root=settings.tool_cache_root)
    if tool_root is None:
        actions.debug(f"gcloud {version} is installed outside the tool cache")
        return
    actions.add_path(tool_root / "bin", settings.github_path)


def authenticate(settings: EnvSettings) -> None:
    cred_file = settings.google_gha_creds_path
    if not cred_file:
        actions.warning(
            "No authentication found, authenticate with `google-github-actions/auth`."
        )
        return

    gcloud_sdk.authenticate_gcloud_sdk(cred_file)
    actions.info("Successfully authenticated")


def execute(cmd: list[str], debug: bool = False) -> ExecOutput:
    """Run gcloud with ``cmd``; output is only streamed when debugging."""
    process = GcloudProcess(silent=not debug)
    actions.info(f"Running: {process.command_string(cmd)}")
    actions.debug(
        json.dumps(
            {
                "toolCommand": process.process_path,
                "args": cmd,
                "options": {"silent": process.silent, "ignoreReturnCode": True},
            },
            indent=2,
        )
    )
    return process.check_cmd(*cmd, error_type=ExecutionError, what="gcloud command")


def invalidate(inputs: InvocationInputs, settings: EnvSettings) -> list[str]:
    """Run the whole pipeline. Returns the arguments gcloud was called with."""
    version = compute_gcloud_version(inputs.gcloud_version, settings)
    cmd = build_command(inputs)

    ensure_gcloud(version, settings)

    if inputs.gcloud_component:
        gcloud_sdk.install_component(inputs.gcloud_component.value)
        cmd.insert(0, inputs.gcloud_component.value)

    authenticate(settings)
    execute(cmd, debug=settings.debug)
    return cmd
