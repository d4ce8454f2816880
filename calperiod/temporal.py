import logging
from dataclasses import dataclass, field

from calperiod.adapters import DateAdapter, create_adapter
from calperiod.errors import ConfigurationError
from calperiod.registry import UnitRegistry, default_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Temporal:
    """Configuration threaded through every period operation.

    Attributes:
        adapter: Backend performing primitive date arithmetic
        week_starts_on: First day of the week, 0=Sunday through 6=Saturday
        registry: Unit table used to resolve unit names
    """

    adapter: DateAdapter
    week_starts_on: int = 1
    registry: UnitRegistry = field(default_factory=default_registry)

    def __post_init__(self) -> None:
        if not isinstance(self.adapter, DateAdapter):
            raise ConfigurationError(
                f"Temporal requires a DateAdapter, got {self.adapter!r}.\n"
                f"Hint: create_temporal('native') or create_temporal(NativeAdapter())"
            )
        if not isinstance(self.week_starts_on, int) or not (
            0 <= self.week_starts_on <= 6
        ):
            raise ConfigurationError(
                f"week_starts_on must be an int in 0..6 (0=Sunday), "
                f"got {self.week_starts_on!r}"
            )


def create_temporal(
    adapter: DateAdapter | str | None = None,
    *,
    week_starts_on: int = 1,
    registry: UnitRegistry | None = None,
) -> Temporal:
    """Build a ``Temporal`` context.

    Args:
        adapter: A ``DateAdapter`` instance or a bundled adapter name
            ("native", "dateutil", "pandas"). Required.
        week_starts_on: First day of the week, 0=Sunday through 6=Saturday
        registry: Unit table to use; defaults to the shared registry.
            Pass ``UnitRegistry.with_defaults()`` for an isolated table.

    Raises:
        ConfigurationError: If no adapter is given or the options are invalid

    Example:
        >>> from calperiod import create_temporal
        >>> temporal = create_temporal("dateutil", week_starts_on=0)
    """
    if adapter is None:
        raise ConfigurationError(
            "create_temporal() requires a date adapter.\n"
            "Example: create_temporal('native') or create_temporal(NativeAdapter())"
        )
    if isinstance(adapter, str):
        adapter = create_adapter(adapter)

    temporal = Temporal(
        adapter=adapter,
        week_starts_on=week_starts_on,
        registry=registry if registry is not None else default_registry(),
    )
    logger.debug(
        "Created temporal context (adapter=%s, week_starts_on=%d)",
        adapter.name,
        week_starts_on,
    )
    return temporal


def require_adapter(temporal: Temporal | None) -> DateAdapter:
    """Return the context's adapter, refusing to guess one."""
    adapter = getattr(temporal, "adapter", None)
    if adapter is None:
        raise ConfigurationError(
            "This operation needs a temporal context with a date adapter.\n"
            "Hint: temporal = create_temporal('native')"
        )
    return adapter
