"""Validation of application and module names for generated projects."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .errors import (
    InvalidAppSyntaxError,
    InvalidModuleSyntaxError,
    ModuleNameTakenError,
    ReservedOrTakenAppNameError,
    ScaffoldError,
)
from .resolver import SymbolResolver

__all__ = [
    "CLI_FLAG_NAMES",
    "IdentifierValidator",
    "LANGUAGE_NAMES",
    "PLATFORM_NAMES",
    "ProjectNames",
    "RESERVED_APP_NAMES",
    "reserved_application_names",
    "validate",
]


LOGGER = logging.getLogger(__name__)

APP_NAME_PATTERN = re.compile(r"[a-z][a-z0-9_]*")
MODULE_NAME_PATTERN = re.compile(r"[A-Z]\w*(\.[A-Z]\w*)*", re.ASCII)

# Runtime flags taking multiple arguments swallow application names.
CLI_FLAG_NAMES = frozenset(
    "boot_var compile config configfd env pa pz path run s setcookie".split()
)
PLATFORM_NAMES = frozenset(
    """
    otp asn1 common_test compiler crypto debugger dialyzer diameter
    edoc eldap erl_docgen erl_interface erts et eunit ftp hipe
    inets jinterface kernel megaco mnesia observer odbc os_mon
    parsetools public_key reltool runtime_tools sasl snmp ssh
    ssl stdlib syntax_tools toolbar tools typer wx xmerl
    """.split()
)
LANGUAGE_NAMES = frozenset("eex elixir ex_unit iex logger mix".split())

RESERVED_APP_NAMES = CLI_FLAG_NAMES | PLATFORM_NAMES | LANGUAGE_NAMES

INFERRED_APP_HINT = (
    ". The application name is inferred from the path, if you'd like to "
    'explicitly name the application then use the "--app APP" option'
)


def reserved_application_names() -> frozenset[str]:
    """Return the names that can never be used as an application name."""

    return RESERVED_APP_NAMES


@dataclass(frozen=True, slots=True)
class ProjectNames:
    """A validated application and module name pair."""

    app: str
    module: str


def _invalid_app(name: str) -> str | None:
    if APP_NAME_PATTERN.fullmatch(name):
        return None
    return (
        "Application name must start with a lowercase ASCII letter, followed by "
        f"lowercase ASCII letters, numbers, or underscores, got: {name!r}"
    )


def _reserved_app(name: str, resolver: SymbolResolver) -> str | None:
    if name in RESERVED_APP_NAMES or resolver.exists(name):
        return f"Cannot use application name {name!r} because it is already used by the platform"
    return None


def _app_error(error_type: type[ScaffoldError], message: str, inferred: bool) -> ScaffoldError:
    if inferred:
        message += INFERRED_APP_HINT
    LOGGER.info("rejected application name: %s", message)
    return error_type(message)


def _qualify(module: str, namespace: str | None) -> str:
    return f"{namespace}.{module}" if namespace else module


def validate(
    app_candidate: str,
    module_candidate: str,
    app_was_inferred: bool,
    resolver: SymbolResolver,
    *,
    namespace: str | None = None,
) -> ProjectNames:
    """Check ``app_candidate`` and ``module_candidate`` and return them as a pair.

    The rules run in a fixed order and the first violation is raised:

    1. the application name must match ``^[a-z][a-z0-9_]*$``
       (:class:`InvalidAppSyntaxError`);
    2. the application name must be neither reserved nor resolvable through
       ``resolver`` (:class:`ReservedOrTakenAppNameError`);
    3. the module name must be a dotted sequence of capitalised words
       (:class:`InvalidModuleSyntaxError`);
    4. the module name, prefixed with ``namespace`` when given, must not be
       resolvable through ``resolver`` (:class:`ModuleNameTakenError`).

    When ``app_was_inferred`` is true the application errors point the user at
    the ``--app`` option. Names are returned exactly as given.
    """

    LOGGER.debug("validating app=%r module=%r", app_candidate, module_candidate)

    message = _invalid_app(app_candidate)
    if message is not None:
        raise _app_error(InvalidAppSyntaxError, message, app_was_inferred)

    message = _reserved_app(app_candidate, resolver)
    if message is not None:
        raise _app_error(ReservedOrTakenAppNameError, message, app_was_inferred)

    if not MODULE_NAME_PATTERN.fullmatch(module_candidate):
        LOGGER.info("rejected module name %r", module_candidate)
        raise InvalidModuleSyntaxError(
            "Module name must be a valid alias (for example: Foo.Bar), "
            f"got: {module_candidate!r}"
        )

    qualified = _qualify(module_candidate, namespace)
    if resolver.exists(qualified):
        LOGGER.info("module name %r is already taken", qualified)
        raise ModuleNameTakenError(
            f"Module name {qualified!r} is already taken, please choose another name"
        )

    return ProjectNames(app=app_candidate, module=module_candidate)


class IdentifierValidator:
    """Validate names against a fixed resolver and namespace."""

    def __init__(self, resolver: SymbolResolver, *, namespace: str | None = None) -> None:
        self.resolver = resolver
        self.namespace = namespace

    def validate(self, app: str, module: str, *, app_was_inferred: bool = False) -> ProjectNames:
        return validate(app, module, app_was_inferred, self.resolver, namespace=self.namespace)
