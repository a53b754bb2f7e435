"""Errors raised while invalidating a CDN cache."""
from __future__ import annotations


class ActionError(Exception):
    """Base class for failures reported back to the pipeline."""


class ConfigurationError(ActionError, ValueError):
    """An input was missing or had a value we do not accept."""


class ProvisioningError(ActionError, RuntimeError):
    """gcloud or one of its components could not be installed."""


class AuthenticationError(ActionError, RuntimeError):
    """gcloud rejected the credentials handed over by the auth step."""


class ExecutionError(ActionError, RuntimeError):
    """A gcloud command exited non-zero."""


def error_message(err: BaseException | str | None) -> str:
    """Normalize an exception into a single human-readable message."""
    if err is None:
        return "unknown error"

    msg = str(err).strip()
    msg = msg.removeprefix("Error: ").strip()
    if not msg:
        return "unknown error"

    if len(msg) > 1:
        msg = msg[0].lower() + msg[1:]
    return msg
