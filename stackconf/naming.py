"""Stage-scoped names and tags for stack resources.

Consumers receive a ResolvedConfig explicitly and derive identifiers from
it, so two stages never collide on construct ids or bucket names.
"""

import re

from stackconf.config.models import ResolvedConfig

BUCKET_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]$")


class StackNaming:
    """Derive resource identifiers from a resolved configuration."""

    def __init__(self, config: ResolvedConfig) -> None:
        self._config = config

    @property
    def stage(self) -> str:
        return self._config.stage

    def construct_id(self, base: str) -> str:
        """Construct id unique per stage, e.g. 'MyInstance-dev'."""
        return f"{base}-{self.stage}"

    def bucket_name(self, prefix: str) -> str:
        """Globally scoped bucket name for this stage.

        Raises:
            ValueError: If the result breaks bucket naming rules
        """
        name = f"{prefix}-{self.stage}".lower()
        if not BUCKET_NAME_PATTERN.match(name) or ".." in name:
            raise ValueError(f"Invalid bucket name: {name!r}")
        return name

    def name_tag(self, resource: str) -> str:
        """Value for the Name tag, e.g. 'development-instance'."""
        label = self._config.environment or self.stage
        return f"{label}-{resource}"

    def resource_tags(self, resource: str) -> dict[str, str]:
        """Configured tags plus Name and stage.

        Tag values are rendered as strings. A 'tags' value that isn't a
        mapping contributes nothing.
        """
        configured = self._config.tags if isinstance(self._config.tags, dict) else {}
        tags = {str(key): str(value) for key, value in configured.items()}
        tags["Name"] = self.name_tag(resource)
        tags["stage"] = self.stage
        return tags
