"""Output schemas for link commands."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Base schema for all command outputs."""

    errors: list[str] = Field(default_factory=list, description="List of error messages, empty list if no errors")
    warnings: list[str] = Field(default_factory=list, description="List of warning messages, empty list if no warnings")


class LinkScanOutput(BaseOutputSchema):
    """Output schema for link scan command."""

    source: str = Field(..., description="File scanned, or '-' for stdin")
    platform: str = Field(..., description="Platform family used for the local path grammar")
    workspace_root: str | None = Field(None, description="Workspace root used for dot-relative paths")
    links: list[dict] = Field(..., description="Arbitrated link spans with line, offsets, text, kind and priority")
    count: int = Field(..., description="Number of spans found")
    validated: bool = Field(..., description="Whether spans were validated")
    success: bool = Field(..., description="Whether scan completed successfully")


class LinkResolveOutput(BaseOutputSchema):
    """Output schema for link resolve command."""

    link: str = Field(..., description="Link text that was resolved")
    platform: str = Field(..., description="Platform family used for resolution")
    candidate: str | None = Field(None, description="Expanded path before the existence check, None if not resolvable")
    resolved: str | None = Field(None, description="Existing file path, None if not a link")
    success: bool = Field(..., description="Whether the link resolved to an existing file")
