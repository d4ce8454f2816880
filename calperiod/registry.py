"""Unit registry: the table mapping unit names to their definitions.

Every period operation looks units up here, which keeps ``divide``,
``next`` and friends unaware of what a "month" or a "sprint" is. A
``Temporal`` context carries its own ``UnitRegistry``; the module-level
functions operate on a shared default table for the common single
configuration case.

Example:
    >>> from datetime import timedelta
    >>> from calperiod import UnitDefinition, define_unit
    >>>
    >>> def sprint(date, temporal):
    ...     start = temporal.adapter.start_of(date, "week", week_starts_on=1)
    ...     return start, start + timedelta(weeks=2)
    >>>
    >>> define_unit(
    ...     "sprint",
    ...     UnitDefinition(create_period=sprint, divisions=("week", "day")),
    ... )
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from calperiod.errors import UnknownUnitError

if TYPE_CHECKING:
    from calperiod.period import Period
    from calperiod.temporal import Temporal

logger = logging.getLogger(__name__)

CreatePeriod = Callable[[datetime, "Temporal"], tuple[datetime, datetime]]


@dataclass(frozen=True, kw_only=True)
class UnitDefinition:
    """How to build, number, compare and subdivide periods of one unit.

    Attributes:
        create_period: Returns ``(start, end)`` for the unit containing a date
        divisions: Units this one may be divided into directly
        merges_to: The natural coarser unit a run of these composes into
        validate: Optional predicate checked by ``validate_period``
        step: One unit of navigation as an adapter duration; ``None``
            navigates by adjacency (the next period starts where this ends)
        number: Optional hook returning the period's number
        is_same: Optional equality hook used instead of the adapter
        partitions: False when consecutive periods overlap (padded grids),
            which rules the unit out as a division target
    """

    create_period: CreatePeriod
    divisions: tuple[str, ...] | None = None
    merges_to: str | None = None
    validate: Callable[["Period"], bool] | None = None
    step: Mapping[str, int] | None = None
    number: Callable[[datetime, "Temporal"], int] | None = None
    is_same: Callable[[datetime, datetime, "Temporal"], bool] | None = None
    partitions: bool = True


class UnitRegistry:
    """A name -> ``UnitDefinition`` table.

    Definitions are registered once at configuration time and looked up on
    every operation. Re-registering a name replaces it with a warning.
    """

    def __init__(self, definitions: Mapping[str, UnitDefinition] | None = None):
        self._units: dict[str, UnitDefinition] = dict(definitions or {})

    @classmethod
    def with_defaults(cls) -> "UnitRegistry":
        """Return a fresh registry holding the built-in units and stableMonth."""
        registry = cls()
        registry.reset()
        return registry

    def define(self, name: str, definition: UnitDefinition) -> None:
        if name in self._units:
            logger.warning(
                "Unit type %r is already defined. Overwriting previous definition.",
                name,
            )
        self._units[name] = definition

    def get(self, name: str) -> UnitDefinition | None:
        return self._units.get(name)

    def require(self, name: str) -> UnitDefinition:
        """Return the definition for ``name`` or raise ``UnknownUnitError``."""
        definition = self._units.get(name)
        if definition is None:
            raise UnknownUnitError(name, known=self._units)
        return definition

    def has(self, name: str) -> bool:
        return name in self._units

    def units(self) -> list[str]:
        return list(self._units)

    def clear(self) -> None:
        self._units.clear()

    def reset(self) -> None:
        """Drop every definition and re-register the defaults."""
        # Import at runtime to avoid circular dependency
        from calperiod.stable import install_stable_month
        from calperiod.units import install_builtin_units

        self._units.clear()
        install_builtin_units(self)
        install_stable_month(self)

    def divisions_of(self, name: str) -> set[str]:
        """Return every unit reachable from ``name`` through ``divisions``."""
        seen: set[str] = set()
        pending = [name]
        while pending:
            definition = self._units.get(pending.pop())
            if definition is None or not definition.divisions:
                continue
            for child in definition.divisions:
                if child not in seen:
                    seen.add(child)
                    pending.append(child)
        seen.discard(name)
        return seen

    def merge_chain(self, name: str) -> list[str]:
        """Return the ``merges_to`` ancestors of ``name``, nearest first."""
        chain: list[str] = []
        definition = self._units.get(name)
        while definition is not None and definition.merges_to is not None:
            parent = definition.merges_to
            if parent in chain or parent == name:
                break
            chain.append(parent)
            definition = self._units.get(parent)
        return chain

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __repr__(self) -> str:
        return f"UnitRegistry({', '.join(self._units)})"


_default: UnitRegistry | None = None


def default_registry() -> UnitRegistry:
    """Return the shared registry, building it with the defaults on first use."""
    global _default
    if _default is None:
        _default = UnitRegistry.with_defaults()
    return _default


def define_unit(name: str, definition: UnitDefinition) -> None:
    default_registry().define(name, definition)


def get_unit_definition(name: str) -> UnitDefinition | None:
    return default_registry().get(name)


def has_unit(name: str) -> bool:
    return default_registry().has(name)


def get_registered_units() -> list[str]:
    return default_registry().units()


def clear_unit_registry() -> None:
    """Remove every unit from the shared registry (test isolation)."""
    default_registry().clear()


def reset_unit_registry() -> None:
    """Restore the shared registry to the built-in units."""
    default_registry().reset()
