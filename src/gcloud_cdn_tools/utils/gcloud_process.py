from __future__ import annotations

import platform
import subprocess
import threading
from typing import NamedTuple

import typer

from gcloud_cdn_tools.errors import ActionError, ExecutionError


class ExecOutput(NamedTuple):
    exit_code: int
    stdout: str
    stderr: str


def get_tool_command() -> str:
    """Name of the gcloud executable on this platform."""
    return "gcloud.cmd" if platform.system() == "Windows" else "gcloud"


class GcloudProcess:
    def __init__(self, silent: bool = True, process_path: str | None = None):
        """Initialize a new GcloudProcess. Output is only echoed when not silent."""
        self.process_path = process_path or get_tool_command()
        self.silent = silent

    def command_string(self, args) -> str:
        return " ".join([self.process_path, *args])

    def run_cmd(self, *args: str) -> ExecOutput:
        """Run a command. A non-zero exit code is returned, not raised."""
        if not self.silent:
            return self._run_streaming(args)

        try:
            proc = subprocess.run(
                [self.process_path, *args],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ExecutionError(
                f"failed to start `{self.command_string(args)}`: {e}"
            ) from e

        return ExecOutput(proc.returncode, proc.stdout or "", proc.stderr or "")

    def _run_streaming(self, args) -> ExecOutput:
        """Echo output line by line as it arrives, keeping a copy of both streams."""
        try:
            proc = subprocess.Popen(
                [self.process_path, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise ExecutionError(
                f"failed to start `{self.command_string(args)}`: {e}"
            ) from e

        stderr_lines: list[str] = []

        def tee_stderr():
            for line in proc.stderr:
                stderr_lines.append(line)
                typer.echo(line, nl=False, err=True)

        with proc:
            reader = threading.Thread(target=tee_stderr, daemon=True)
            reader.start()

            stdout_lines = []
            for line in proc.stdout:
                stdout_lines.append(line)
                typer.echo(line, nl=False)

            reader.join()
            exit_code = proc.wait()

        return ExecOutput(exit_code, "".join(stdout_lines), "".join(stderr_lines))

    def check_cmd(
        self,
        *args: str,
        error_type: type[ActionError] = ExecutionError,
        what: str = "command",
    ) -> ExecOutput:
        """Run a command, raising ``error_type`` if it exits non-zero."""
        output = self.run_cmd(*args)
        if output.exit_code != 0:
            err_msg = (
                output.stderr.strip()
                or f"command exited {output.exit_code}, but stderr had no output"
            )
            raise error_type(
                f"failed to execute {what} `{self.command_string(args)}`: {err_msg}"
            )
        return output
