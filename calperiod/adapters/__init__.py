"""Interchangeable date backends.

Three adapters ship with calperiod, all passing the same compliance suite:

- ``NativeAdapter``: standard library only
- ``DateutilAdapter``: python-dateutil ``relativedelta``
- ``PandasAdapter``: pandas ``Timestamp``/``DateOffset``
"""

from calperiod.adapters.base import DateAdapter
from calperiod.adapters.dateutil_adapter import DateutilAdapter
from calperiod.adapters.native import NativeAdapter
from calperiod.adapters.pandas_adapter import PandasAdapter
from calperiod.errors import ConfigurationError

ADAPTERS: dict[str, type[DateAdapter]] = {
    NativeAdapter.name: NativeAdapter,
    DateutilAdapter.name: DateutilAdapter,
    PandasAdapter.name: PandasAdapter,
}


def create_adapter(name: str) -> DateAdapter:
    """Instantiate a bundled adapter by name ("native", "dateutil" or "pandas")."""
    try:
        adapter_class = ADAPTERS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown adapter: {name!r}\n"
            f"Available adapters: {', '.join(sorted(ADAPTERS))}\n"
            f"Or pass a DateAdapter instance: create_temporal(NativeAdapter())"
        ) from None
    return adapter_class()


__all__ = [
    "ADAPTERS",
    "DateAdapter",
    "DateutilAdapter",
    "NativeAdapter",
    "PandasAdapter",
    "create_adapter",
]
