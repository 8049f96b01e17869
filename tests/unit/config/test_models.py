"""Unit tests for configuration Pydantic models."""

import pytest
from pydantic import ValidationError

from stackconf.config.models import (
    ComputeConfig,
    Ec2Config,
    LoggingConfig,
    ResolvedConfig,
)


class TestResolvedConfig:
    """Tests for ResolvedConfig model."""

    def test_stage_is_required(self) -> None:
        """A configuration without a stage is invalid."""
        with pytest.raises(ValidationError):
            ResolvedConfig.model_validate({"aws_region": "us-west-2"})

    def test_stage_must_be_supported(self) -> None:
        """Only local, dev and prod are accepted."""
        with pytest.raises(ValidationError):
            ResolvedConfig.model_validate({"stage": "qa"})

    def test_known_fields_default_to_none(self) -> None:
        """Fields no document set are None."""
        config = ResolvedConfig.model_validate({"stage": "dev"})
        assert config.aws_account is None
        assert config.aws_region is None
        assert config.compute is None
        assert config.tags is None

    def test_email_address_alias(self) -> None:
        """emailAddress in documents is readable as email_address."""
        config = ResolvedConfig.model_validate(
            {"stage": "dev", "emailAddress": "ops@example.com"}
        )
        assert config.email_address == "ops@example.com"

    def test_snake_case_email_kept_as_written(self) -> None:
        """email_address is read without adding an emailAddress key."""
        data = {"stage": "dev", "email_address": "ops@example.com"}
        config = ResolvedConfig.model_validate(data)
        assert config.email_address == "ops@example.com"
        assert config.as_dict() == data

    def test_numeric_account_kept_as_written(self) -> None:
        """Unquoted account ids keep their document type."""
        config = ResolvedConfig.model_validate({"stage": "prod", "aws_account": 123456789012})
        assert config.aws_account == 123456789012

    def test_boolean_account_kept(self) -> None:
        """Known fields do not reject values of another type."""
        config = ResolvedConfig.model_validate({"stage": "prod", "aws_account": True})
        assert config.aws_account is True

    def test_non_string_tag_values_kept(self) -> None:
        """Tag values are not coerced."""
        config = ResolvedConfig.model_validate(
            {"stage": "dev", "tags": {"cost_center": 1234, "app": ["a"]}}
        )
        assert config.tags == {"cost_center": 1234, "app": ["a"]}

    def test_extra_keys_allowed(self) -> None:
        """Keys outside the schema are kept."""
        config = ResolvedConfig.model_validate({"stage": "dev", "vpc": {"cidr": "10.0.0.0/16"}})
        assert config.model_extra == {"vpc": {"cidr": "10.0.0.0/16"}}

    def test_as_dict_omits_unset_fields(self) -> None:
        """as_dict mirrors the merged mapping."""
        data = {
            "stage": "dev",
            "emailAddress": "ops@example.com",
            "compute": {"ec2": {"os_size": "t2.micro"}},
        }
        assert ResolvedConfig.model_validate(data).as_dict() == data


class TestComputeConfig:
    """Tests for compute models."""

    def test_defaults(self) -> None:
        """Default values are correct."""
        assert ComputeConfig().ec2 is None
        ec2 = Ec2Config()
        assert ec2.os_ami is None
        assert ec2.os_size is None

    def test_ec2_from_mapping(self) -> None:
        """Nested mappings validate into Ec2Config."""
        compute = ComputeConfig.model_validate({"ec2": {"os_ami": "ami-1", "os_size": "t3.small"}})
        assert compute.ec2 == Ec2Config(os_ami="ami-1", os_size="t3.small")

    def test_scalar_compute_kept(self) -> None:
        """A scalar in place of compute is kept as written."""
        config = ResolvedConfig.model_validate({"stage": "dev", "compute": "none"})
        assert config.compute == "none"
        assert config.as_dict()["compute"] == "none"


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self) -> None:
        """Default values are correct."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.format == "console"
        assert config.redact_pii is True

    def test_level_case_insensitive(self) -> None:
        """Lower-case level names are normalized."""
        assert LoggingConfig(level="debug").level == "DEBUG"  # type: ignore[arg-type]

    def test_invalid_level(self) -> None:
        """Unknown levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]

    def test_invalid_format(self) -> None:
        """Unknown formats are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(format="xml")  # type: ignore[arg-type]
