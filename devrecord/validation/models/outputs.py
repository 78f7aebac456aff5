"""Output models for MCP server tools."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TemplateMetadata(BaseModel):
    """Discovery entry for one template file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    template_name: str = Field(alias="templateName")
    filename: str
    description: str


class TemplateListOutput(BaseModel):
    """Output for get_template_list."""

    model_config = ConfigDict(populate_by_name=True)

    templates: List[TemplateMetadata] = Field(default_factory=list)
    count: int
    message: str
    usage: str = "Use the 'templateName' field from any template to call get_template_detail"


class TemplateDetailOutput(BaseModel):
    """Output for get_template_detail."""

    model_config = ConfigDict(populate_by_name=True)

    template_name: str = Field(alias="templateName")
    content: str
    description: str
    message: str
