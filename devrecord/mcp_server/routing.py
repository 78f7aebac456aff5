"""Tool routing and dispatch for MCP server."""

from __future__ import annotations

from typing import Any, Dict

from devrecord.errors import map_error_for_mcp
from devrecord.exceptions import DevRecordError, InvalidArgumentsError, UnknownToolError
from devrecord.logger import Logger
from devrecord.validation import validate_arguments

from devrecord.mcp_server.responses import ResponseEnvelope, _error
from devrecord.mcp_server.tool_schemas import get_tool_definition, tool_names
from devrecord.mcp_server.tool_types import ToolHandler

from devrecord.mcp_server.tools.discovery import (
    _tool_get_template_detail,
    _tool_get_template_list,
)


HANDLERS: Dict[str, ToolHandler] = {
    "get_template_list": _tool_get_template_list,
    "get_template_detail": _tool_get_template_detail,
}


def _domain_error(exc: DevRecordError) -> ResponseEnvelope:
    fields = map_error_for_mcp(exc)
    return _error(
        code=fields.pop("error_code"),
        message=fields.pop("error"),
        recovery=fields.pop("suggestion"),
        details=fields,
    )


async def dispatch_tool_call(
    *,
    name: str,
    arguments: Any,
    logger: Logger,
) -> ResponseEnvelope:
    """Validate and route one tool call; always returns exactly one envelope."""
    arg_keys = list(arguments.keys()) if isinstance(arguments, dict) else []
    logger.info("Tool invocation started", tool=name, args_keys=arg_keys)

    definition = get_tool_definition(name)
    handler = HANDLERS.get(name)
    if definition is None or handler is None:
        logger.error("Unknown tool requested", tool=name, available_tools=tool_names())
        return _domain_error(UnknownToolError(name, tool_names()))

    validation = validate_arguments(definition.contract, arguments)
    if not validation.ok:
        logger.warning(
            "Argument validation failed",
            tool=name,
            fields=validation.violated_fields,
        )
        return _domain_error(
            InvalidArgumentsError(
                name,
                [v.model_dump(mode="json") for v in validation.violations],
                hint=definition.argument_hint,
            )
        )

    try:
        result = await handler(validation.values)
    except DevRecordError as exc:
        logger.error(
            "Domain error",
            tool=name,
            error_code=exc.code,
            error_type=type(exc).__name__,
            error_message=str(exc),
        )
        return _domain_error(exc)
    except Exception as exc:
        logger.error(
            "Unexpected tool failure",
            tool=name,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return _error(
            code="UNEXPECTED_ERROR",
            message=f"Unexpected error in {name}: {exc}",
            recovery="Check server logs for details and retry the request.",
        )

    if result.success:
        logger.info("Tool completed successfully", tool=name)
    else:
        logger.warning("Tool completed with error", tool=name, error_code=result.error_code)
    return result

