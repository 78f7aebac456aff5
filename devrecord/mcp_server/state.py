from __future__ import annotations

from typing import Optional

from devrecord.templates import TemplateCatalog

from devrecord.mcp_server.components import ServerComponents

components: Optional[ServerComponents] = None


def set_components(value: Optional[ServerComponents]) -> None:
    global components
    components = value


def require_components() -> None:
    if components is None:
        raise RuntimeError("Server components have not been initialised")


def get_components() -> Optional[ServerComponents]:
    return components


def ensure_template_catalog() -> TemplateCatalog:
    require_components()
    assert components is not None
    return components.template_catalog
