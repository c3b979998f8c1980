"""Variant registry for ems.

Every family of interchangeable behaviors in the package (employee
factories, detail presenters, command processors) is collected in a
``PluginRegistry`` keyed by a short tag such as ``"full-time"`` or
``"handler-1"``.  Callers look variants up by tag instead of importing
concrete classes, and third-party packages can contribute new variants
through entry-points.

Example
-------
Define a family and its registry::

    from abc import ABC, abstractmethod
    from ems.plugins.registry import PluginRegistry

    class Greeter(ABC):
        @abstractmethod
        def greet(self) -> str: ...

    greeters: PluginRegistry[Greeter] = PluginRegistry(Greeter, "greeters")

Register a variant with the decorator::

    @greeters.register("formal")
    class FormalGreeter(Greeter):
        def greet(self) -> str:
            return "Good day."

Retrieve it by tag::

    cls = greeters.get("formal")
    cls().greet()
"""
from __future__ import annotations

import importlib.metadata
import logging
from abc import ABC
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ABC)


class PluginNotFoundError(KeyError):
    """Raised when a requested variant tag is not in the registry."""

    def __init__(self, name: str, registry_name: str, available: list[str] | None = None) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        self.available = available or []
        choices = ", ".join(self.available) if self.available else "none"
        super().__init__(
            f"{name!r} is not registered in the {registry_name!r} registry "
            f"(available: {choices})."
        )

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes.
        return str(self.args[0])


class PluginAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a tag that already exists."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        super().__init__(
            f"{name!r} is already registered in the {registry_name!r} registry. "
            "Deregister the existing entry first."
        )


class PluginRegistry(Generic[T]):
    """Type-safe registry of variant classes.

    Parameters
    ----------
    base_class:
        The abstract base class every variant must subclass.
    name:
        A human-readable name for this registry (used in error messages
        and logs).
    """

    def __init__(self, base_class: type[T], name: str) -> None:
        self._base_class = base_class
        self._name = name
        self._plugins: dict[str, type[T]] = {}

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Return a class decorator that registers the decorated class.

        The class is returned unchanged so it stays usable directly.

        Raises
        ------
        PluginAlreadyRegisteredError
            If ``name`` is already in use in this registry.
        TypeError
            If the decorated class does not subclass ``base_class``.
        """

        def decorator(cls: type[T]) -> type[T]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[T]) -> None:
        """Register ``cls`` under ``name`` without decorator syntax."""
        if name in self._plugins:
            raise PluginAlreadyRegisteredError(name, self._name)
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                f"it must be a subclass of {self._base_class.__name__}."
            )
        self._plugins[name] = cls
        logger.debug("Registered %r -> %s in %r", name, cls.__qualname__, self._name)

    def deregister(self, name: str) -> None:
        """Remove a variant from the registry.

        Raises
        ------
        PluginNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._plugins:
            raise PluginNotFoundError(name, self._name, self.list_plugins())
        del self._plugins[name]
        logger.debug("Deregistered %r from %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[T]:
        """Return the class registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If no variant is registered under ``name``.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name, self._name, self.list_plugins()) from None

    def list_plugins(self) -> list[str]:
        """Return registered tags in registration order."""
        return list(self._plugins)

    def items(self) -> list[tuple[str, type[T]]]:
        return list(self._plugins.items())

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._plugins))

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return (
            f"PluginRegistry(name={self._name!r}, "
            f"base_class={self._base_class.__name__}, "
            f"plugins={self.list_plugins()})"
        )

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str) -> int:
        """Register variants declared as package entry-points in ``group``.

        Tags that are already registered are skipped, so repeated calls
        are idempotent.  Entry-points that fail to import or do not
        subclass the base class are logged and skipped.

        Returns
        -------
        int
            The number of variants newly registered.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."ems.employee_factories"]
            contractor = "my_package.staff:ContractorFactory"
        """
        loaded = 0
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._plugins:
                logger.debug("Entry-point %r already registered in %r; skipping.", ep.name, self._name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception("Failed to load entry-point %r from group %r; skipping.", ep.name, group)
                continue
            try:
                self.register_class(ep.name, cls)
            except (PluginAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            loaded += 1
        return loaded
