"""Domain constants for ledger chart reporting."""

INCLUDE_NET_WORTH_META_KEY = "include_net_worth"

NET_WORTH_STEP_DAYS = 7
DEFAULT_NET_WORTH_LABEL_FORMAT = "%b %d"
NET_WORTH_CACHE_NAME = "chart.report.net-worth"
OPERATIONS_CACHE_NAME = "chart.report.operations"

EARNED_BACKGROUND_COLOR = "rgba(0, 141, 76, 0.5)"
SPENT_BACKGROUND_COLOR = "rgba(219, 68, 55, 0.5)"

OPERATIONS_PERIOD = "1M"


__all__ = [
    "INCLUDE_NET_WORTH_META_KEY",
    "NET_WORTH_STEP_DAYS",
    "DEFAULT_NET_WORTH_LABEL_FORMAT",
    "NET_WORTH_CACHE_NAME",
    "OPERATIONS_CACHE_NAME",
    "EARNED_BACKGROUND_COLOR",
    "SPENT_BACKGROUND_COLOR",
    "OPERATIONS_PERIOD",
]
