"""
Pydantic Models

Report payloads produced by the traversal measurement helpers in utils.py.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class TraversalReport(BaseModel):
    """Outcome of running one combinator over a counted source"""
    operation: str = Field(..., description="Name given to the measured operation")
    success: bool = Field(..., description="Whether the operation returned without raising")
    result: Optional[bool] = Field(
        None,
        description="Verdict returned by the combinator"
    )
    items_pulled: int = Field(
        ...,
        description="Items pulled from the source before the verdict",
        ge=0
    )
    exhausted: bool = Field(
        ...,
        description="Whether the source signalled exhaustion during the run"
    )
    execution_time_ms: float = Field(..., description="Wall time in milliseconds", ge=0)
    memory_usage_mb: float = Field(..., description="Peak traced memory in megabytes", ge=0)
    error: Optional[str] = Field(None, description="Error message if the operation raised")
    timestamp: float = Field(..., description="Unix time the run finished")


class PerformanceSummary(BaseModel):
    """Aggregate over every recorded traversal"""
    total_operations: int = Field(0, ge=0)
    total_items_pulled: int = Field(0, ge=0)
    total_time_ms: float = Field(0.0, ge=0)
    total_memory_mb: float = Field(0.0, ge=0)
    avg_time_ms: float = Field(0.0, ge=0)
    avg_memory_mb: float = Field(0.0, ge=0)
    operations: List[str] = Field(
        default_factory=list,
        description="Operation names in the order they were measured"
    )
