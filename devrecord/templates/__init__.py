"""Template catalog package."""

from devrecord.templates.catalog import TemplateCatalog
from devrecord.templates.descriptions import DEFAULT_TEMPLATE_DESCRIPTIONS, load_descriptions

__all__ = ["TemplateCatalog", "DEFAULT_TEMPLATE_DESCRIPTIONS", "load_descriptions"]
