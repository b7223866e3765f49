"""Configuration shared by the project scaffolder and CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .errors import MissingPathError
from .identifiers import validate
from .naming import camelize, underscore
from .resolver import ImportlibResolver, SymbolResolver
from .versioning import VersionSpec

__all__ = ["DEFAULT_HOST_VERSION", "ProjectConfig"]


LOGGER = logging.getLogger(__name__)

# Toolchain release the generated manifest requires unless told otherwise.
DEFAULT_HOST_VERSION = "1.15.0"


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Validated identifiers and versions describing a new project.

    Attributes
    ----------
    app:
        The application name, either given explicitly or inferred from the
        basename of the target path.
    module:
        The top level module name. Defaults to the camel-cased application
        name.
    version:
        The host version, used to render the version requirement of the
        generated manifest.
    app_was_inferred:
        ``True`` when :attr:`app` was derived from the path.
    """

    app: str
    module: str
    version: VersionSpec
    app_was_inferred: bool = False

    @classmethod
    def from_path(
        cls,
        path: str | Path | None,
        *,
        app: str | None = None,
        module: str | None = None,
        resolver: SymbolResolver | None = None,
        namespace: str | None = None,
        host_version: str | None = None,
    ) -> "ProjectConfig":
        """Derive and validate a :class:`ProjectConfig` for ``path``.

        Parameters
        ----------
        path:
            Target directory of the new project. ``"."`` refers to the current
            directory.
        app:
            Optionally override the application name inferred from ``path``.
        module:
            Optionally override the module name derived from the application
            name.
        resolver:
            Answers whether a name is already taken. Defaults to
            :class:`~projectsmith.resolver.ImportlibResolver`.
        namespace:
            Prefix joined to the module name before asking ``resolver``.
        host_version:
            Semantic version of the toolchain the generated project targets.
            Defaults to :data:`DEFAULT_HOST_VERSION`.
        """

        if path is None or not str(path):
            raise MissingPathError('Expected PATH to be given, please use "projectsmith PATH"')

        app_was_inferred = app is None
        app_name = Path(path).expanduser().resolve().name if app is None else app
        module_name = camelize(app_name) if module is None else module

        names = validate(
            app_name,
            module_name,
            app_was_inferred,
            resolver or ImportlibResolver(),
            namespace=namespace,
        )

        version = VersionSpec.parse(host_version or DEFAULT_HOST_VERSION)
        LOGGER.debug("resolved app=%s module=%s version=%s", names.app, names.module, version)
        return cls(
            app=names.app,
            module=names.module,
            version=version,
            app_was_inferred=app_was_inferred,
        )

    @property
    def mod_filename(self) -> str:
        """Filesystem form of :attr:`module`, e.g. ``foo/bar`` for ``Foo.Bar``."""

        return underscore(self.module)

    def context(self) -> Mapping[str, Any]:
        """Return the read-only mapping handed to the template renderer."""

        return MappingProxyType(
            {
                "app": self.app,
                "mod": self.module,
                "version": self.version.requirement,
            }
        )
