from .adapters import (
    ADAPTERS,
    DateAdapter,
    DateutilAdapter,
    NativeAdapter,
    PandasAdapter,
    create_adapter,
)
from .compare import contains, is_same, is_today, is_weekday, is_weekend
from .divide import divide, zoom_in
from .errors import (
    CalperiodError,
    ConfigurationError,
    InvalidDivisionError,
    UnknownUnitError,
    ValidationError,
)
from .factory import create_period, to_period, validate_period
from .navigation import go, next_period, previous_period, zoom_out, zoom_to
from .period import Period, create_custom_period
from .registry import (
    UnitDefinition,
    UnitRegistry,
    clear_unit_registry,
    default_registry,
    define_unit,
    get_registered_units,
    get_unit_definition,
    has_unit,
    reset_unit_registry,
)
from .slicing import merge, split, split_at
from .stable import STABLE_MONTH, is_padding, nominal_month
from .temporal import Temporal, create_temporal
from .util import (
    CUSTOM,
    DAY,
    HOUR,
    MINUTE,
    MONTH,
    QUARTER,
    RESOLUTION,
    SECOND,
    WEEK,
    YEAR,
    Duration,
)

__all__ = [
    "Period",
    "Temporal",
    "UnitDefinition",
    "UnitRegistry",
    "DateAdapter",
    "NativeAdapter",
    "DateutilAdapter",
    "PandasAdapter",
    "ADAPTERS",
    "Duration",
    "create_adapter",
    "create_temporal",
    "create_period",
    "create_custom_period",
    "to_period",
    "validate_period",
    "divide",
    "zoom_in",
    "zoom_out",
    "zoom_to",
    "next_period",
    "previous_period",
    "go",
    "contains",
    "is_same",
    "is_today",
    "is_weekday",
    "is_weekend",
    "split",
    "split_at",
    "merge",
    "is_padding",
    "nominal_month",
    "define_unit",
    "get_unit_definition",
    "has_unit",
    "get_registered_units",
    "clear_unit_registry",
    "reset_unit_registry",
    "default_registry",
    "CalperiodError",
    "ConfigurationError",
    "UnknownUnitError",
    "InvalidDivisionError",
    "ValidationError",
    "YEAR",
    "QUARTER",
    "MONTH",
    "WEEK",
    "DAY",
    "HOUR",
    "MINUTE",
    "SECOND",
    "CUSTOM",
    "STABLE_MONTH",
    "RESOLUTION",
]
