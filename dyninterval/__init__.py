"DynInterval: intervals whose delay is computed anew before every tick."

__project__ = "DynInterval"
__version__ = "0.1.0"
__author__ = "DynInterval contributors"
__copyright__ = "2024, DynInterval contributors"

from dyninterval import delays
from dyninterval.interval import (
    DynamicInterval,
    clearDynamicInterval,
    scheduleDynamicInterval,
    setDynamicInterval,
)
from dyninterval.timer import (
    AsyncioTimerHost,
    ThreadingTimerHost,
    TimerProtocol,
    defaultTimerHost,
    setDefaultTimerHost,
)

__all__ = [
    "AsyncioTimerHost",
    "DynamicInterval",
    "ThreadingTimerHost",
    "TimerProtocol",
    "clearDynamicInterval",
    "defaultTimerHost",
    "delays",
    "scheduleDynamicInterval",
    "setDefaultTimerHost",
    "setDynamicInterval",
]
