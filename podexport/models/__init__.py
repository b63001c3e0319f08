"""Data models for podcast export."""

from podexport.models.episode import (
    CachedFile,
    MetadataRecord,
    ResolvedEpisode,
    ExportPlan,
    ExportOutcome,
    ExportReport,
)

__all__ = [
    "CachedFile",
    "MetadataRecord",
    "ResolvedEpisode",
    "ExportPlan",
    "ExportOutcome",
    "ExportReport",
]
