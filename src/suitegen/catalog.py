"""Known SuiteScript script types, API versions and ``N/*`` modules.

The tables are built once at import time and exposed through read-only
mappings keyed by the lower case lookup key of each entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, TypeVar

__all__ = [
    "API_VERSIONS",
    "ApiVersionEntry",
    "DEFAULT_API_VERSION",
    "MODULES",
    "ModuleEntry",
    "SCRIPT_TYPES",
    "ScriptTypeEntry",
]


DEFAULT_API_VERSION = "2.1"


@dataclass(frozen=True, slots=True)
class ScriptTypeEntry:
    """A script type recognised by the ``@NScriptType`` annotation."""

    lookup_key: str
    display_name: str
    script_suffix: bool = False

    @property
    def annotation(self) -> str:
        """Value written after ``@NScriptType``."""

        if self.script_suffix:
            return f"{self.display_name}Script"
        return self.display_name


@dataclass(frozen=True, slots=True)
class ApiVersionEntry:
    """A value accepted by the ``@NApiVersion`` annotation."""

    lookup_key: str
    display_value: str
    legacy: bool = False


@dataclass(frozen=True, slots=True)
class ModuleEntry:
    """An ``N/*`` module that can be listed in the ``define`` preamble.

    Attributes
    ----------
    lookup_key:
        Lower case module path without the ``N/`` prefix.
    display_name:
        The module path with its canonical casing, e.g. ``ui/serverWidget``.
    parameter_name:
        Identifier bound to the module in the ``define`` callback.
    """

    lookup_key: str
    display_name: str
    parameter_name: str

    @property
    def path(self) -> str:
        return f"N/{self.display_name}"


_EntryT = TypeVar("_EntryT", ScriptTypeEntry, ApiVersionEntry, ModuleEntry)


def _index(entries: Iterable[_EntryT]) -> Mapping[str, _EntryT]:
    table: dict[str, _EntryT] = {}
    for entry in entries:
        if entry.lookup_key in table:
            raise ValueError(f"duplicate lookup key '{entry.lookup_key}'")
        table[entry.lookup_key] = entry
    return MappingProxyType(table)


def _script_type(display_name: str, *, script_suffix: bool = False) -> ScriptTypeEntry:
    return ScriptTypeEntry(display_name.lower(), display_name, script_suffix)


def _module(display_name: str, parameter_name: str | None = None) -> ModuleEntry:
    parameter = parameter_name or display_name.rsplit("/", 1)[-1]
    return ModuleEntry(display_name.lower(), display_name, parameter)


SCRIPT_TYPES: Mapping[str, ScriptTypeEntry] = _index(
    [
        _script_type("MapReduce", script_suffix=True),
        _script_type("Client", script_suffix=True),
        _script_type("UserEvent", script_suffix=True),
        _script_type("Scheduled", script_suffix=True),
        _script_type("Suitelet"),
        _script_type("RESTlet"),
        _script_type("Portlet"),
        _script_type("MassUpdate", script_suffix=True),
        _script_type("WorkflowAction", script_suffix=True),
        _script_type("BundleInstallation", script_suffix=True),
        _script_type("SDFInstallation", script_suffix=True),
    ]
)

# "1" and "2" were accepted by older releases of the generator.
API_VERSIONS: Mapping[str, ApiVersionEntry] = _index(
    [
        ApiVersionEntry("2.0", "2.0"),
        ApiVersionEntry("2.x", "2.x"),
        ApiVersionEntry("2.1", "2.1"),
        ApiVersionEntry("2", "2", legacy=True),
        ApiVersionEntry("1", "1", legacy=True),
    ]
)

MODULES: Mapping[str, ModuleEntry] = _index(
    [
        _module("action"),
        _module("auth"),
        _module("cache"),
        _module("certificateControl"),
        _module("commerce/recordView"),
        _module("compress"),
        _module("config"),
        _module("crypto"),
        _module("crypto/certificate"),
        _module("crypto/random"),
        _module("currency"),
        _module("currentRecord"),
        _module("dataset"),
        _module("datasetLink"),
        _module("documentCapture"),
        _module("email"),
        _module("encode"),
        _module("error"),
        _module("file"),
        _module("format"),
        _module("format/i18n"),
        _module("http"),
        _module("https"),
        _module("https/clientCertificate"),
        _module("keyControl"),
        _module("llm"),
        _module("log"),
        _module("machineTranslation"),
        _module("pgp"),
        _module("piremoval"),
        _module("plugin"),
        _module("portlet"),
        _module("query"),
        _module("record"),
        _module("recordContext"),
        _module("redirect"),
        _module("render"),
        _module("runtime"),
        _module("search"),
        _module("sftp"),
        _module("sso"),
        _module("suiteAppInfo"),
        _module("task"),
        _module("task/accounting/recognition"),
        _module("transaction"),
        _module("translation"),
        _module("ui/dialog"),
        _module("ui/message"),
        _module("ui/serverWidget"),
        _module("url"),
        _module("util"),
        _module("workbook"),
        _module("workflow"),
        _module("xml"),
    ]
)
