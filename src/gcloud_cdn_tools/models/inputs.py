from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from gcloud_cdn_tools.errors import ConfigurationError
from gcloud_cdn_tools.utils import actions


class GcloudComponent(enum.StrEnum):
    ALPHA = "alpha"
    BETA = "beta"

    @classmethod
    def parse(cls, value: str | None) -> GcloudComponent | None:
        """Parse a component input. Empty means no component."""
        value = (value or "").strip()
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                f"invalid input received for gcloud_component: {value}"
            ) from None


class InvocationInputs(BaseModel):
    """Everything one invalidation run needs from its caller."""

    model_config = ConfigDict(frozen=True)

    load_balancer_name: str = Field(min_length=1)
    path: str = Field(min_length=1)
    host: str | None = None
    gcloud_version: str | None = None
    gcloud_component: GcloudComponent | None = None

    @classmethod
    def create(
        cls,
        load_balancer_name: str,
        path: str,
        host: str | None = None,
        gcloud_version: str | None = None,
        gcloud_component: str | None = None,
    ) -> InvocationInputs:
        """Build inputs from raw strings, validating the component first."""
        component = GcloudComponent.parse(gcloud_component)
        return cls(
            load_balancer_name=load_balancer_name,
            path=path,
            host=(host or "").strip() or None,
            gcloud_version=(gcloud_version or "").strip() or None,
            gcloud_component=component,
        )

    @classmethod
    def from_action_inputs(cls) -> InvocationInputs:
        """Read the step's ``INPUT_*`` variables."""
        return cls.create(
            load_balancer_name=actions.get_input("load_balancer_name", required=True),
            path=actions.get_input("path", required=True),
            host=actions.get_input("host"),
            gcloud_version=actions.get_input("gcloud_version"),
            gcloud_component=actions.get_input("gcloud_component"),
        )
