import os
from dataclasses import dataclass, field

import pytest

from gcloud_cdn_tools.utils import gcloud_sdk, tool_cache
from gcloud_cdn_tools.utils.gcloud_process import ExecOutput, GcloudProcess

RUNNER_ENV = (
    "ACTIONS_RUNNER_DEBUG",
    "ACTIONS_STEP_DEBUG",
    "GOOGLE_GHA_CREDS_PATH",
    "GITHUB_PATH",
    "RUNNER_TEMP",
    "GCLOUD_RELEASE_URL",
)


@pytest.fixture(autouse=True)
def runner_env(monkeypatch, tmp_path):
    """Isolate each test from the real runner environment."""
    for name in list(os.environ):
        if name.startswith("INPUT_"):
            monkeypatch.delenv(name)
    for name in RUNNER_ENV:
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setenv("RUNNER_TOOL_CACHE", str(tmp_path / "tool-cache"))
    # restored after the test, add_path mutates it
    monkeypatch.setenv("PATH", os.environ.get("PATH", ""))
    return tmp_path


@pytest.fixture
def set_inputs(monkeypatch):
    def _set(**inputs: str):
        for name, value in inputs.items():
            monkeypatch.setenv(f"INPUT_{name.upper()}", value)

    return _set


def make_cached_gcloud(root, version: str):
    """Lay out a finished gcloud install in the tool cache."""
    arch = tool_cache.current_arch()
    tool_path = root / "gcloud" / version / arch
    (tool_path / "bin").mkdir(parents=True)
    (root / "gcloud" / version / f"{arch}.complete").write_text("")
    return tool_path


@dataclass
class SdkMocks:
    """Records calls into the Cloud SDK collaborators and gcloud itself."""

    installed: bool = True
    latest: str = "1.2.3"
    exec_output: ExecOutput = ExecOutput(0, "{}", "")

    latest_calls: int = 0
    installed_versions: list = field(default_factory=list)
    components: list = field(default_factory=list)
    cred_files: list = field(default_factory=list)
    exec_calls: list = field(default_factory=list)
    exec_silent: list = field(default_factory=list)

    @property
    def last_args(self) -> list:
        return self.exec_calls[-1]


@pytest.fixture
def sdk(monkeypatch) -> SdkMocks:
    mocks = SdkMocks()

    def get_latest(settings=None):
        mocks.latest_calls += 1
        return mocks.latest

    def is_installed(version=None, settings=None):
        return mocks.installed

    def install_gcloud_sdk(version, settings=None):
        mocks.installed_versions.append(version)

    def install_component(component):
        mocks.components.append(component)

    def authenticate(cred_file):
        mocks.cred_files.append(cred_file)

    def run_cmd(self, *args):
        mocks.exec_calls.append(list(args))
        mocks.exec_silent.append(self.silent)
        return mocks.exec_output

    monkeypatch.setattr(gcloud_sdk, "get_latest_gcloud_sdk_version", get_latest)
    monkeypatch.setattr(gcloud_sdk, "is_installed", is_installed)
    monkeypatch.setattr(gcloud_sdk, "install_gcloud_sdk", install_gcloud_sdk)
    monkeypatch.setattr(gcloud_sdk, "install_component", install_component)
    monkeypatch.setattr(gcloud_sdk, "authenticate_gcloud_sdk", authenticate)
    monkeypatch.setattr(GcloudProcess, "run_cmd", run_cmd)
    return mocks
