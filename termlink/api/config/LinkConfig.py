"""Link handler configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LinkConfig(BaseModel):
    """Settings for link matching, hover tooltips, and the diagnostic CLI."""

    model_config = ConfigDict(extra="forbid")

    hover_delay_ms: int = Field(500, ge=0, description="Delay before the follow-link tooltip is shown")
    hypertext_enabled: bool = Field(True, description="Register the built-in hypertext matcher")
    workspace_root: str | None = Field(None, description="Default workspace root for the CLI")

    @field_validator("workspace_root")
    @classmethod
    def _strip_workspace_root(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def hover_delay_seconds(self) -> float:
        return self.hover_delay_ms / 1000
