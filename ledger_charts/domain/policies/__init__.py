"""Domain policies package."""

from .flow_classification import FlowSide, classify_flow

__all__ = ["FlowSide", "classify_flow"]
