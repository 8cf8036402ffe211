"""Builders for the individual sections of a generated script.

Every builder is a pure function returning ``""`` when its section is not
requested.
"""

from __future__ import annotations

from typing import Any, Sequence

from .catalog import ApiVersionEntry, ModuleEntry, ScriptTypeEntry
from .template import TemplateRenderer

__all__ = [
    "build_copyright",
    "build_dependency_preamble",
    "build_type_annotation",
    "build_version_annotation",
]


COPYRIGHT_TEMPLATE = "/*\n{{ text }}\n*/"

TYPE_ANNOTATION_TEMPLATE = " * @NScriptType {{ entry.annotation }}"

VERSION_ANNOTATION_TEMPLATE = " * @NApiVersion {{ entry.display_value }}"

DEPENDENCY_TEMPLATE = """define([{{ modules|paths }}], ({{ modules|parameters }}) => {

});"""

DEPENDENCY_LINE_TEMPLATE = "  {{ module.path|quote }},\n"


def _dependency_paths(modules: Sequence[ModuleEntry]) -> str:
    if not modules:
        return ""
    return "\n" + "".join(_render(DEPENDENCY_LINE_TEMPLATE, module=module) for module in modules)


def _parameter_list(modules: Sequence[ModuleEntry]) -> str:
    return ", ".join(module.parameter_name for module in modules)


_RENDERER = TemplateRenderer(
    filters={
        "paths": _dependency_paths,
        "parameters": _parameter_list,
    }
)


def _render(template: str, **context: Any) -> str:
    return _RENDERER.render_string(template, context, missing="error")


def build_copyright(text: str | None) -> str:
    """Wrap ``text`` in a block comment, leaving its contents untouched."""

    if text is None:
        return ""
    return _render(COPYRIGHT_TEMPLATE, text=text)


def build_type_annotation(entry: ScriptTypeEntry | None) -> str:
    if entry is None:
        return ""
    return _render(TYPE_ANNOTATION_TEMPLATE, entry=entry)


def build_version_annotation(entry: ApiVersionEntry) -> str:
    return _render(VERSION_ANNOTATION_TEMPLATE, entry=entry)


def build_dependency_preamble(modules: Sequence[ModuleEntry]) -> str:
    """Return the ``define`` wrapper importing ``modules``.

    Paths and callback parameters are produced from the same sequence, so the
    n-th path is always bound to the n-th parameter. The wrapper is emitted
    even when ``modules`` is empty.
    """

    return _render(DEPENDENCY_TEMPLATE, modules=tuple(modules))
