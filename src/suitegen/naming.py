"""Resolve user supplied names to canonical catalog entries."""

from __future__ import annotations

import logging
from typing import Iterable

from .catalog import (
    API_VERSIONS,
    DEFAULT_API_VERSION,
    MODULES,
    SCRIPT_TYPES,
    ApiVersionEntry,
    ModuleEntry,
    ScriptTypeEntry,
)
from .errors import UnknownApiVersion, UnknownModule, UnknownScriptType

__all__ = [
    "normalize_key",
    "resolve_api_version",
    "resolve_modules",
    "resolve_script_type",
]


LOGGER = logging.getLogger(__name__)


def normalize_key(value: str) -> str:
    """Return the lookup key for ``value``.

    Only surrounding whitespace and letter case are ignored, so ``" mApReDuCe "``
    and ``"MapReduce"`` share a key while ``"Map Reduce"`` does not.
    """

    return value.strip().lower()


def resolve_script_type(raw: str | None) -> ScriptTypeEntry | None:
    """Return the script type named by ``raw`` or ``None`` when it is blank."""

    if raw is None or not raw.strip():
        return None

    try:
        return SCRIPT_TYPES[normalize_key(raw)]
    except KeyError:
        raise UnknownScriptType(raw) from None


def resolve_api_version(raw: str | None, *, allow_legacy: bool = False) -> ApiVersionEntry:
    """Return the API version named by ``raw``.

    ``None`` selects :data:`~suitegen.catalog.DEFAULT_API_VERSION`. Legacy
    versions are only accepted when ``allow_legacy`` is true.
    """

    value = DEFAULT_API_VERSION if raw is None else raw
    entry = API_VERSIONS.get(normalize_key(value))
    if entry is None or (entry.legacy and not allow_legacy):
        raise UnknownApiVersion(value)

    if entry.legacy:
        LOGGER.warning("API version %s is deprecated", entry.display_value)
    return entry


def resolve_modules(raw: Iterable[str]) -> tuple[ModuleEntry, ...]:
    """Resolve every token in ``raw``, keeping order and duplicates.

    The first unknown token aborts the whole call. A repeated module is kept
    but logged, since it binds the same callback parameter twice.
    """

    resolved: list[ModuleEntry] = []
    for token in raw:
        try:
            entry = MODULES[normalize_key(token)]
        except KeyError:
            raise UnknownModule(token) from None
        if entry in resolved:
            LOGGER.warning("module %s is listed more than once", entry.path)
        resolved.append(entry)
    return tuple(resolved)
