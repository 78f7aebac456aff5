"""Template tool handlers.

Handlers receive argument bundles that already passed contract validation in
the dispatcher: only fields named by the tool's contract are present, with
the declared kinds.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List

from devrecord.exceptions import CatalogError, TemplateNotFoundError
from devrecord.mcp_server.responses import ResponseEnvelope, _error, _success
from devrecord.mcp_server.state import ensure_template_catalog
from devrecord.validation.models import (
    TemplateDetailOutput,
    TemplateListOutput,
    TemplateMetadata,
)


async def _tool_get_template_list(arguments: Dict[str, Any]) -> ResponseEnvelope:
    catalog = ensure_template_catalog()
    templates: List[TemplateMetadata] = await asyncio.to_thread(lambda: list(catalog.list_templates()))
    output = TemplateListOutput(
        templates=templates,
        count=len(templates),
        message=f"Found {len(templates)} available templates",
    )
    return _success(output)


async def _tool_get_template_detail(arguments: Dict[str, Any]) -> ResponseEnvelope:
    template_name: str = arguments["templateName"]
    catalog = ensure_template_catalog()
    try:
        content = await asyncio.to_thread(catalog.get_template_content, template_name)
    except TemplateNotFoundError as exc:
        # Offer the valid names so the caller can retry without another round trip
        try:
            available = await asyncio.to_thread(catalog.list_template_names)
        except CatalogError:
            available = []
        return _error(
            code=exc.code,
            message=exc.message,
            recovery=exc.recovery,
            details={"templateName": template_name, "available_templates": available},
        )

    output = TemplateDetailOutput(
        template_name=template_name,
        content=content,
        description=catalog.describe(template_name),
        message=f"Successfully retrieved template '{template_name}'",
    )
    return _success(output)
