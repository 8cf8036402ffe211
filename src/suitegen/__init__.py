"""Generate skeleton SuiteScript files.

The package resolves loosely typed script types, API versions and ``N/*``
module names against fixed catalogs, builds the annotation block and ``define``
preamble from small string templates and assembles them into a single script.
It can be used programmatically or through the ``suitegen`` command.
"""

from __future__ import annotations

from .catalog import ApiVersionEntry, ModuleEntry, ScriptTypeEntry
from .config import GenerationRequest, GeneratorSettings
from .errors import (
    GenerationError,
    MissingFilename,
    UnknownApiVersion,
    UnknownModule,
    UnknownScriptType,
)
from .naming import resolve_api_version, resolve_modules, resolve_script_type
from .scaffold import GeneratedDocument, ScriptScaffolder, assemble

__all__ = [
    "ApiVersionEntry",
    "GeneratedDocument",
    "GenerationError",
    "GenerationRequest",
    "GeneratorSettings",
    "MissingFilename",
    "ModuleEntry",
    "ScriptScaffolder",
    "ScriptTypeEntry",
    "UnknownApiVersion",
    "UnknownModule",
    "UnknownScriptType",
    "assemble",
    "resolve_api_version",
    "resolve_modules",
    "resolve_script_type",
]

__version__ = "0.1.0"
