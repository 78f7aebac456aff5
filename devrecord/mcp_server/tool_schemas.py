"""Tool registry for the devrecord MCP server.

The registry is a fixed, ordered tuple of ToolDefinitions. Each definition's
contract is used both to validate incoming arguments and, projected to JSON
Schema, as the ``inputSchema`` advertised by ``list_tools``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from mcp.types import Tool

from devrecord.validation.contracts import ArgumentField, ArgumentKind, Contract


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    contract: Contract
    argument_hint: Optional[str] = None

    @property
    def input_schema(self) -> Dict[str, object]:
        return self.contract.to_json_schema()

    def to_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


GET_TEMPLATE_LIST = ToolDefinition(
    name="get_template_list",
    description=(
        "Discovery - List the available development record templates. "
        "WORKFLOW: Start here. Returns structured data with templateName, filename and description for each template. "
        "The templateName field of each entry in 'templates' is the required argument of get_template_detail. "
        "NEXT STEPS: Pick a template and call get_template_detail with its templateName to get the full content."
    ),
    contract=Contract(
        fields=(
            ArgumentField(
                name="dummy",
                kind=ArgumentKind.STRING,
                description="Dummy parameter for no-parameter tools",
            ),
        )
    ),
)

GET_TEMPLATE_DETAIL = ToolDefinition(
    name="get_template_detail",
    description=(
        "Template Content - Get the full content of one template to use as a document skeleton. "
        "PARAMETERS: templateName must be a templateName value returned by get_template_list. "
        "Returns: templateName, content (the complete template text) and description. "
        "ERROR RECOVERY: If the template does not exist, a clear error is returned; call get_template_list to see valid names."
    ),
    contract=Contract(
        fields=(
            ArgumentField(
                name="templateName",
                kind=ArgumentKind.STRING,
                description=(
                    "Template file name without extension. Must be a templateName from the "
                    "'templates' returned by get_template_list."
                ),
                required=True,
                min_length=1,
            ),
        )
    ),
    argument_hint="Use a templateName returned by get_template_list.",
)

TOOL_DEFINITIONS: Tuple[ToolDefinition, ...] = (GET_TEMPLATE_LIST, GET_TEMPLATE_DETAIL)

_BY_NAME: Dict[str, ToolDefinition] = {definition.name: definition for definition in TOOL_DEFINITIONS}


def get_tool_definition(name: str) -> Optional[ToolDefinition]:
    return _BY_NAME.get(name)


def tool_names() -> List[str]:
    return [definition.name for definition in TOOL_DEFINITIONS]


async def build_tools() -> List[Tool]:
    return [definition.to_tool() for definition in TOOL_DEFINITIONS]
