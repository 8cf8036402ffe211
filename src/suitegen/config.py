"""Request and settings objects shared by the generator and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .catalog import DEFAULT_API_VERSION

__all__ = ["GenerationRequest", "GeneratorSettings", "SCRIPT_EXTENSION"]


SCRIPT_EXTENSION = ".js"


class GenerationRequest(BaseModel):
    """Raw options describing one script file to generate.

    Values are kept exactly as the user typed them; resolving them against the
    catalog is left to :mod:`suitegen.naming` so error messages can quote the
    original input.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    filename: str | None = Field(None, description="Name of the generated file, ending in .js.")
    copyright_text: str | None = Field(None, description="Text placed in the leading comment block.")
    script_type: str | None = Field(None, description="Raw @NScriptType value.")
    api_version: str | None = Field(None, description="Raw @NApiVersion value.")
    modules: Tuple[str, ...] = Field(default_factory=tuple, description="Raw N/* module tokens in order.")

    @field_validator("filename")
    @classmethod
    def _check_extension(cls, value: str | None) -> str | None:
        if value and value.strip() and not value.strip().lower().endswith(SCRIPT_EXTENSION):
            raise ValueError(f"file name must end in '{SCRIPT_EXTENSION}'")
        return value


@dataclass(slots=True)
class GeneratorSettings:
    """Process wide options for :class:`~suitegen.scaffold.ScriptScaffolder`.

    Attributes
    ----------
    default_api_version:
        Version used when a request does not name one.
    allow_legacy_api_versions:
        Accept the deprecated ``1`` and ``2`` API versions.
    """

    default_api_version: str = DEFAULT_API_VERSION
    allow_legacy_api_versions: bool = False

    def api_version_for(self, request: GenerationRequest) -> str:
        """Return the raw API version requested, falling back to the default."""

        if request.api_version is None:
            return self.default_api_version
        return request.api_version
