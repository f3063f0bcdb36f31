"""
Backend registry for lemmapipe.

Stemmer and speller engines register themselves as BackendSpec objects, either from
the built-in ``lemmapipe.backends`` package or through the ``lemmapipe.backends``
entry point group, so adapters can ask for an engine by name.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import pkgutil
from importlib import metadata
from typing import Any, Dict, List, Optional

from .backend_spec import SPELLER, STEMMER, BackendSpec
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_BACKEND_REGISTRY: Dict[str, BackendSpec] = {}


def register_backend_spec(spec: BackendSpec) -> None:
    """Register an engine backend (replaces any backend with the same name)."""
    if spec.kind not in (STEMMER, SPELLER):
        raise ValueError(f"Backend '{spec.name}' has unknown kind '{spec.kind}'")
    _BACKEND_REGISTRY[spec.name.lower()] = spec


def unregister_backend(name: str) -> None:
    _BACKEND_REGISTRY.pop(name.lower(), None)


def _load_spec_from_module(module_name: str) -> Optional[BackendSpec]:
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:  # pragma: no cover
        logger.debug("Failed to import backend module '%s': %s", module_name, exc)
        return None
    spec = getattr(module, "BACKEND_SPEC", None)
    if spec is None:
        logger.debug("Module '%s' does not define BACKEND_SPEC", module_name)
        return None
    if not isinstance(spec, BackendSpec):
        logger.warning("Module '%s' BACKEND_SPEC is not a BackendSpec instance", module_name)
        return None
    return spec


def _iter_builtin_backend_specs():
    from . import backends as backend_pkg

    prefix = backend_pkg.__name__ + "."
    for module_info in pkgutil.iter_modules(backend_pkg.__path__, prefix):
        spec = _load_spec_from_module(module_info.name)
        if spec:
            yield spec


def _iter_entry_point_backend_specs():
    try:
        backend_eps = metadata.entry_points().select(group="lemmapipe.backends")
    except Exception as exc:  # pragma: no cover - depends on runtime env
        logger.debug("Unable to read backend entry points: %s", exc)
        return
    for ep in backend_eps:
        try:
            spec = ep.load()
        except Exception as exc:
            logger.warning("Failed to load backend entry point '%s': %s", ep.name, exc)
            continue
        if not isinstance(spec, BackendSpec):
            logger.warning("Entry point '%s' did not return a BackendSpec instance", ep.name)
            continue
        yield spec


def _register_discovered_backends() -> None:
    for iterable in (_iter_builtin_backend_specs(), _iter_entry_point_backend_specs()):
        for spec in iterable:
            register_backend_spec(spec)


def get_backend_info(name: str) -> Optional[BackendSpec]:
    """Get backend information by name."""
    return _BACKEND_REGISTRY.get(name.lower())


def list_backends(kind: Optional[str] = None) -> Dict[str, BackendSpec]:
    """List registered backends, optionally only stemmers or only spellers."""
    return {
        name: spec
        for name, spec in sorted(_BACKEND_REGISTRY.items())
        if kind is None or spec.kind == kind
    }


def get_backend_choices(kind: Optional[str] = None) -> List[str]:
    """Get list of backend names for CLI choices."""
    return list(list_backends(kind).keys())


def get_backend_status(name: str) -> Dict[str, Any]:
    """
    Get status information about a backend, including what's missing.

    Returns:
        Dictionary with keys:
        - available: bool - whether the backend's module can be imported
        - status: str - "available", "missing_module" or "unknown"
        - missing: List[str] - missing requirements
        - install_hint: str - suggested pip install command
    """
    spec = get_backend_info(name)
    if not spec:
        return {
            "available": False,
            "status": "unknown",
            "missing": [f"Backend '{name}' is not registered"],
            "install_hint": "",
        }
    if spec.module_name:
        try:
            found = importlib.util.find_spec(spec.module_name) is not None
        except (ImportError, ValueError):
            found = False
        if not found:
            return {
                "available": False,
                "status": "missing_module",
                "missing": [f"{spec.module_name} module"],
                "install_hint": spec.install_hint or "",
            }
    return {
        "available": True,
        "status": "available",
        "missing": [],
        "install_hint": "",
    }


def resolve_backend(name: str, kind: str) -> BackendSpec:
    """
    Look up a registered backend of the given kind.

    Raises:
        ConfigurationError: if the backend is unknown, of the wrong kind or not installed
    """
    spec = get_backend_info(name)
    if spec is None:
        available = ", ".join(get_backend_choices(kind)) or "none"
        raise ConfigurationError(f"Unknown {kind} backend '{name}'. Available: {available}")
    if spec.kind != kind:
        raise ConfigurationError(f"Backend '{name}' is a {spec.kind}, not a {kind}")
    status = get_backend_status(name)
    if not status["available"]:
        hint = f" Install it with: {status['install_hint']}" if status["install_hint"] else ""
        raise ConfigurationError(
            f"{kind.capitalize()} backend '{name}' requires {', '.join(status['missing'])}.{hint}"
        )
    return spec


_register_discovered_backends()
