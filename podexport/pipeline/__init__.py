"""Export pipeline: reconciliation, planning and file placement."""

from podexport.pipeline.reconcile import (
    build_metadata_index,
    resolve_export_base,
    resolve_episode,
    filter_episodes,
    deduplicate,
    reconcile,
)
from podexport.pipeline.exporter import (
    export_episode,
    export_plan,
)
from podexport.pipeline.orchestrator import (
    ExportPipeline,
    PipelineResult,
)

__all__ = [
    "build_metadata_index",
    "resolve_export_base",
    "resolve_episode",
    "filter_episodes",
    "deduplicate",
    "reconcile",
    "export_episode",
    "export_plan",
    "ExportPipeline",
    "PipelineResult",
]
