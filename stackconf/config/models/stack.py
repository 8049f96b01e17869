"""Resolved stack configuration models.

Known fields are declared with their expected type first. A document may
still put any value there (the override wins a type conflict outright), so
every known field also accepts Any and keeps such a value as written.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from stackconf.stage import Stage

EMAIL_KEYS: tuple[str, ...] = ("emailAddress", "email_address")


class Ec2Config(BaseModel):
    """Virtual machine sizing."""

    model_config = ConfigDict(extra="allow", frozen=True)

    os_ami: str | Any = Field(
        default=None,
        union_mode="left_to_right",
        description="Machine image id",
    )
    os_size: str | Any = Field(
        default=None,
        union_mode="left_to_right",
        description="Instance type",
    )


class ComputeConfig(BaseModel):
    """Compute settings."""

    model_config = ConfigDict(extra="allow", frozen=True)

    ec2: Ec2Config | Any = Field(
        default=None,
        union_mode="left_to_right",
        description="EC2 instance settings",
    )


class ResolvedConfig(BaseModel):
    """Configuration for one stage: common defaults merged with stage overrides.

    Keys the schema does not name are kept as extra fields so nothing from
    either document is lost. The operator address is read from extras
    because documents spell it either 'emailAddress' or 'email_address'.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    stage: Stage = Field(..., description="Stage the configuration was resolved for")
    aws_account: str | Any = Field(
        default=None,
        union_mode="left_to_right",
        description="Target account id",
    )
    aws_region: str | Any = Field(
        default=None,
        union_mode="left_to_right",
        description="Target region",
    )
    name: str | Any = Field(
        default=None,
        union_mode="left_to_right",
        description="Application name",
    )
    environment: str | Any = Field(
        default=None,
        union_mode="left_to_right",
        description="Environment label used in resource names",
    )
    tags: dict[str, str] | Any = Field(
        default=None,
        union_mode="left_to_right",
        description="Tags applied to every resource",
    )
    compute: ComputeConfig | Any = Field(
        default=None,
        union_mode="left_to_right",
        description="Compute settings",
    )

    @property
    def email_address(self) -> Any:
        """Operator contact address, whichever spelling the documents used."""
        extra = self.model_extra or {}
        for key in EMAIL_KEYS:
            if key in extra:
                return extra[key]
        return None

    def as_dict(self, mode: Literal["python", "json"] = "python") -> dict[str, Any]:
        """Return the merged mapping, without fields no document set.

        mode="json" turns dates and times into ISO strings.
        """
        return self.model_dump(mode=mode, exclude_unset=True)
