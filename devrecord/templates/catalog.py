"""Template catalog over a directory of Markdown files."""
import os
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Union

from devrecord.config_docs import DEFAULT_FALLBACK_DESCRIPTION, DEFAULT_TEMPLATE_EXTENSION
from devrecord.exceptions import CatalogError, TemplateNotFoundError
from devrecord.logger import Logger
from devrecord.templates.descriptions import DEFAULT_TEMPLATE_DESCRIPTIONS
from devrecord.validation.models import TemplateMetadata


class TemplateCatalog:
    """Discovery and retrieval of document templates.

    The catalog is the only component that touches the template directory.
    Nothing is cached: every listing re-reads the directory and every
    retrieval re-reads the file, so edits show up without a restart.

    Templates are listed in ascending filename order.
    """

    def __init__(
        self,
        templates_dir: Union[str, Path],
        logger: Logger,
        descriptions: Optional[Mapping[str, str]] = None,
        extension: str = DEFAULT_TEMPLATE_EXTENSION,
        fallback_description: str = DEFAULT_FALLBACK_DESCRIPTION,
    ):
        """
        Initialize the template catalog.

        Args:
            templates_dir: Path to directory containing template files
            logger: Logger instance
            descriptions: Template name to description mapping
                (defaults to the built-in table)
            extension: File extension that marks a template, including the dot
            fallback_description: Description for names not in the mapping
        """
        self.templates_dir = Path(templates_dir)
        self.logger = logger
        if descriptions is None:
            descriptions = DEFAULT_TEMPLATE_DESCRIPTIONS
        self._descriptions: Mapping[str, str] = MappingProxyType(dict(descriptions))
        self.extension = extension
        self.fallback_description = fallback_description

    @property
    def descriptions(self) -> Mapping[str, str]:
        return self._descriptions

    def describe(self, template_name: str) -> str:
        return self._descriptions.get(template_name, self.fallback_description)

    def _template_filenames(self) -> List[str]:
        try:
            with os.scandir(self.templates_dir) as entries:
                names = [
                    entry.name
                    for entry in entries
                    if os.path.splitext(entry.name)[1] == self.extension and entry.is_file()
                ]
        except OSError as e:
            self.logger.error(
                "Failed to read templates directory",
                templates_dir=str(self.templates_dir),
                error=str(e),
            )
            raise CatalogError(
                f"Failed to get template list: {e}",
                details={"templates": []},
            ) from e
        return sorted(names)

    def list_templates(self) -> Iterator[TemplateMetadata]:
        """Yield metadata for every template, in filename order.

        The directory is read when iteration starts; each call starts over.

        Raises:
            CatalogError: If the template directory cannot be read.
        """
        for filename in self._template_filenames():
            template_name = filename[: -len(self.extension)]
            yield TemplateMetadata(
                template_name=template_name,
                filename=filename,
                description=self.describe(template_name),
            )

    def list_template_names(self) -> List[str]:
        return [item.template_name for item in self.list_templates()]

    def _template_path(self, template_name: str) -> Optional[Path]:
        # Only plain file stems resolve; anything path-like is treated as unknown
        if (
            not template_name
            or template_name in (".", "..")
            or "/" in template_name
            or "\\" in template_name
            or os.sep in template_name
            or "\x00" in template_name
        ):
            return None
        return self.templates_dir / f"{template_name}{self.extension}"

    def template_exists(self, template_name: str) -> bool:
        path = self._template_path(template_name)
        return path is not None and path.is_file()

    def get_template_content(self, template_name: str) -> str:
        """Return the full text of a template, verbatim.

        Newlines are not translated, so the returned string matches the
        file's UTF-8 decoded bytes exactly.

        Raises:
            TemplateNotFoundError: If no template file exists for the name.
            CatalogError: If the file exists but cannot be read as text.
        """
        path = self._template_path(template_name)
        if path is None or not path.is_file():
            raise TemplateNotFoundError(template_name)

        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except FileNotFoundError as e:
            # removed between the existence check and the read
            raise TemplateNotFoundError(template_name) from e
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(
                "Failed to read template",
                template=template_name,
                path=str(path),
                error=str(e),
            )
            raise CatalogError(
                f"Failed to get template detail: {e}",
                details={"templateName": template_name},
            ) from e

        self.logger.debug("Read template", template=template_name, chars=len(content))
        return content
