"""Pipeline stages after decoding: ordering and the end-to-end driver."""

from work_history.pipeline.orchestrator import (
    PipelineOrchestrator,
    PipelineResult,
    run_pipeline,
    validate_paths,
)
from work_history.pipeline.sorter import sort_by_end_date

__all__ = [
    "PipelineOrchestrator",
    "PipelineResult",
    "run_pipeline",
    "sort_by_end_date",
    "validate_paths",
]
