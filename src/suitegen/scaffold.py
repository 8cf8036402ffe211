"""Assemble script sections and write the generated file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import GenerationRequest, GeneratorSettings
from .errors import MissingFilename
from .fragments import (
    build_copyright,
    build_dependency_preamble,
    build_type_annotation,
    build_version_annotation,
)
from .naming import resolve_api_version, resolve_modules, resolve_script_type

__all__ = ["GeneratedDocument", "ScriptScaffolder", "assemble"]


LOGGER = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n"


@dataclass(frozen=True, slots=True)
class GeneratedDocument:
    """The sections of a generated script in output order."""

    sections: tuple[str, ...]

    def render(self) -> str:
        body = SECTION_SEPARATOR.join(section for section in self.sections if section)
        return f"{body}\n"

    def __str__(self) -> str:
        return self.render()


def assemble(
    copyright: str,
    type_annotation: str,
    version_annotation: str,
    dependency_preamble: str,
) -> GeneratedDocument:
    """Combine pre-built fragments into a :class:`GeneratedDocument`.

    The annotations share a single ``/** ... */`` block. Empty fragments are
    dropped so omitted sections never leave blank lines behind.
    """

    annotation_lines = [line for line in (type_annotation, version_annotation) if line]
    header = ""
    if annotation_lines:
        header = "\n".join(["/**", *annotation_lines, " */"])

    sections = tuple(section for section in (copyright, header, dependency_preamble) if section)
    return GeneratedDocument(sections)


@dataclass(slots=True)
class ScriptScaffolder:
    """Generate SuiteScript skeleton files from a :class:`GenerationRequest`."""

    settings: GeneratorSettings = field(default_factory=GeneratorSettings)

    def generate(self, request: GenerationRequest) -> GeneratedDocument:
        """Validate ``request`` and build the document without touching disk.

        Every option is resolved before any fragment is built, so a single
        invalid value aborts the whole generation.
        """

        if not request.filename or not request.filename.strip():
            raise MissingFilename()

        script_type = resolve_script_type(request.script_type)
        api_version = resolve_api_version(
            self.settings.api_version_for(request),
            allow_legacy=self.settings.allow_legacy_api_versions,
        )
        modules = resolve_modules(request.modules)
        LOGGER.debug(
            "generate filename=%s type=%s version=%s modules=%s",
            request.filename,
            script_type.display_name if script_type else None,
            api_version.display_value,
            [module.path for module in modules],
        )

        return assemble(
            build_copyright(request.copyright_text),
            build_type_annotation(script_type),
            build_version_annotation(api_version),
            build_dependency_preamble(modules),
        )

    def create(
        self,
        request: GenerationRequest,
        target_dir: str | Path = ".",
        *,
        force: bool = False,
    ) -> Path:
        """Generate ``request`` and write it below ``target_dir``.

        Returns the path of the written file. Nothing is written when
        generation fails.
        """

        document = self.generate(request)

        destination = Path(target_dir).expanduser() / request.filename.strip()
        if not destination.parent.is_dir():
            raise FileNotFoundError(f"parent directory {destination.parent} does not exist")
        if destination.is_dir():
            raise IsADirectoryError(f"{destination} is a directory")
        if destination.exists() and not force:
            raise FileExistsError(f"{destination} already exists")

        destination.write_text(document.render(), encoding="utf-8")
        LOGGER.debug("wrote %s", destination)
        return destination
