"""Utilities for declaratively registering application modules.

Each feature module exposes a blueprint (and optionally a ``setup_module``
hook and ``module_metadata``) from its package. The registry imports the
package, runs the hook so routes and event listeners get attached, and then
registers the blueprint with the app.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    """Describe how a blueprint-backed module is registered with the app."""

    import_path: str
    attribute: str = "blueprint"
    url_prefix: Optional[str] = None
    version: str = "1.0"

    def load_module(self):
        return import_string(self.import_path)

    def load_blueprint(self) -> Blueprint:
        """Import and return the blueprint described by this definition."""

        module = self.load_module()
        blueprint = getattr(module, self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (self.attribute, self.import_path, type(blueprint))
            )
        return blueprint


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    """Register all modules in the provided iterable with the Flask app."""

    for definition in modules:
        module = definition.load_module()
        metadata = getattr(module, "module_metadata", {})
        if not metadata.get("enabled", True):
            app.logger.info("Skipping disabled module %s", definition.import_path)
            continue

        setup = getattr(module, "setup_module", None)
        if callable(setup):
            setup(app)

        blueprint = definition.load_blueprint()
        app.register_blueprint(blueprint, url_prefix=definition.url_prefix)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            definition.import_path,
            definition.version,
            definition.url_prefix or blueprint.url_prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in Fretlog modules."""

    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("fretlog_app.modules.shared", version="1.0"),
    ModuleDefinition("fretlog_app.modules.caged", version="1.0"),
    ModuleDefinition("fretlog_app.modules.progression", version="1.0"),
    ModuleDefinition("fretlog_app.modules.dashboard", version="1.0"),
    ModuleDefinition("fretlog_app.modules.note_finder", version="1.0"),
)
