"""Template lookup exceptions."""
from devrecord.exceptions.base import DevRecordError


class TemplateNotFoundError(DevRecordError):
    """Raised when no template file exists for a template name."""

    code = "TEMPLATE_NOT_FOUND"

    def __init__(self, template_name: str):
        self.template_name = template_name
        super().__init__(
            f"Template '{template_name}' does not exist",
            details={"templateName": template_name},
            recovery="Use get_template_list to see available templates",
        )


class CatalogError(DevRecordError):
    """Raised when the template directory or a template file cannot be read.

    Distinct from TemplateNotFoundError: the name may be fine and a retry
    may succeed.
    """

    code = "CATALOG_FAILURE"
    default_recovery = (
        "The template store could not be read. Retry the request; "
        "if the failure persists, check the server logs."
    )
