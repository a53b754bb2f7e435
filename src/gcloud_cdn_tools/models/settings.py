from pathlib import Path

import dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gcloud_cdn_tools.utils.actions import parse_boolean


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=dotenv.find_dotenv(usecwd=True) or None,
        extra="ignore",
    )

    # debug
    actions_runner_debug: bool = False
    actions_step_debug: bool = False

    # written by google-github-actions/auth
    google_gha_creds_path: str | None = None

    # runner layout
    runner_tool_cache: Path | None = None
    runner_temp: Path | None = None
    github_path: Path | None = None

    gcloud_release_url: str = "https://dl.google.com/dl/cloudsdk/channels/rapid/"

    @field_validator("actions_runner_debug", "actions_step_debug", mode="before")
    @classmethod
    def _parse_bool(cls, value):
        if isinstance(value, bool):
            return value
        return parse_boolean(value)

    @field_validator(
        "google_gha_creds_path",
        "runner_tool_cache",
        "runner_temp",
        "github_path",
        mode="before",
    )
    @classmethod
    def _blank_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def debug(self) -> bool:
        """True if runner debugging or step debugging is enabled."""
        return self.actions_runner_debug or self.actions_step_debug

    @property
    def tool_cache_root(self) -> Path:
        if self.runner_tool_cache:
            return self.runner_tool_cache
        return Path.home() / ".cache" / "gcloud-cdn-tools" / "tool-cache"

    @property
    def temp_root(self) -> Path | None:
        return self.runner_temp
