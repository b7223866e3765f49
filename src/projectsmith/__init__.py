"""Generate new project skeletons.

The package validates an application and module name pair, renders a fixed
set of templates with a minimal ``<%= ... %>`` language and writes the result
into a new directory. Everything is usable programmatically as well as via the
``projectsmith`` command.
"""

from __future__ import annotations

from .config import ProjectConfig
from .errors import (
    DirectoryConfirmationDeclinedError,
    InvalidAppSyntaxError,
    InvalidModuleSyntaxError,
    MissingPathError,
    ModuleNameTakenError,
    ReservedOrTakenAppNameError,
    ScaffoldError,
)
from .identifiers import IdentifierValidator, ProjectNames, reserved_application_names, validate
from .naming import camelize, underscore
from .resolver import ImportlibResolver, StaticResolver, SymbolResolver
from .scaffold import ProjectScaffolder
from .schema import RenderedFile
from .template import TemplateRenderer, TemplateRenderingError, TemplateSyntaxError, render
from .versioning import VersionSpec

__all__ = [
    "DirectoryConfirmationDeclinedError",
    "IdentifierValidator",
    "ImportlibResolver",
    "InvalidAppSyntaxError",
    "InvalidModuleSyntaxError",
    "MissingPathError",
    "ModuleNameTakenError",
    "ProjectConfig",
    "ProjectNames",
    "ProjectScaffolder",
    "RenderedFile",
    "ReservedOrTakenAppNameError",
    "ScaffoldError",
    "StaticResolver",
    "SymbolResolver",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TemplateSyntaxError",
    "VersionSpec",
    "camelize",
    "render",
    "reserved_application_names",
    "underscore",
    "validate",
]

__version__ = "0.1.0"
