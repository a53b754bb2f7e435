from __future__ import annotations

from typing import Any, Callable, ParamSpec, TypeVar

import typer

from gcloud_cdn_tools.errors import error_message
from gcloud_cdn_tools.models.settings import EnvSettings

T = TypeVar("T")
P = ParamSpec("P")


def assert_exists(*target: T, msg: str) -> tuple[T, ...]:
    """Assert that objects are truthy."""
    if not all(target):
        typer.echo(f"❌  {msg}")
        raise SystemExit(1)
    return target


def attempt(func: Callable[P, T], *args: Any) -> T:
    """Call func; print the error and exit 1 unless debugging."""
    try:
        return func(*args)
    except Exception as e:
        if EnvSettings().debug:
            raise
        typer.echo(f"❌  Error: {error_message(e)}")
        raise SystemExit(1)
