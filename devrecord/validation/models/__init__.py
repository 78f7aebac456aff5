"""Pydantic models for the template tools.

- outputs.py: Output models for MCP tools
"""

from .outputs import TemplateDetailOutput, TemplateListOutput, TemplateMetadata

__all__ = [
    "TemplateDetailOutput",
    "TemplateListOutput",
    "TemplateMetadata",
]
