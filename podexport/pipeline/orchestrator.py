"""Orchestration of the podcast export pipeline."""

from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

from podexport.classification.tags import read_title_tag
from podexport.config.context import ExportOptions
from podexport.filesystem.discovery import get_cached_files
from podexport.library.locations import PodcastsLibrary
from podexport.library.metadata_db import load_metadata_records
from podexport.models.episode import CachedFile, ExportPlan, ExportReport, MetadataRecord
from podexport.pipeline.exporter import export_plan
from podexport.pipeline.reconcile import TagReader, reconcile


@dataclass
class PipelineResult:
    """Outcome of a complete pipeline run."""

    plan: ExportPlan
    report: ExportReport
    metadata_available: bool


class ExportPipeline:
    """
    Runs the export steps in order: metadata, cache, plan, copy.

    Keeps the sequencing of the steps apart from the CLI so each
    step can be tested on its own.
    """

    def __init__(
        self,
        library: PodcastsLibrary,
        options: ExportOptions,
        tag_reader: TagReader = read_title_tag,
    ):
        """
        Initialize the pipeline.

        Args:
            library: Podcasts library locations.
            options: Explicit export options.
            tag_reader: Reader of the embedded title tag.
        """
        self.library = library
        self.options = options
        self.tag_reader = tag_reader

    def load_metadata(self) -> List[MetadataRecord]:
        """Load library metadata; an unusable database gives an empty list."""
        return load_metadata_records(self.library.database_path)

    def discover(self) -> List[CachedFile]:
        """
        List the cached episodes.

        Raises:
            CacheDirectoryError: If the cache is missing or unreadable.
        """
        return get_cached_files(self.library.cache_dir)

    def plan(
        self,
        cached_files: List[CachedFile],
        metadata: List[MetadataRecord],
    ) -> ExportPlan:
        """Build the deduplicated export plan."""
        opts = self.options
        return reconcile(
            cached_files,
            metadata,
            filters=opts.patterns,
            sanitize_whitespace=opts.replace_spaces,
            tag_reader=self.tag_reader,
            max_workers=opts.max_workers,
            show_progress=not opts.quiet,
        )

    def export(self, plan: ExportPlan) -> ExportReport:
        """Copy the planned episodes into the output tree."""
        opts = self.options
        return export_plan(
            plan,
            opts.output_root,
            adjust_timestamps=opts.update_timestamps,
            dry_run=opts.dry_run,
            max_workers=opts.max_workers,
            show_progress=not opts.quiet,
        )

    def run(self, metadata: Optional[List[MetadataRecord]] = None) -> PipelineResult:
        """
        Run the whole pipeline.

        Args:
            metadata: Already loaded metadata (read from the database otherwise).

        Returns:
            PipelineResult with the plan and the export report.
        """
        if metadata is None:
            metadata = self.load_metadata()

        cached_files = self.discover()
        plan = self.plan(cached_files, metadata)

        if self.options.patterns:
            logger.info(f"Exporting {len(plan)} of {plan.total_candidates}")

        report = self.export(plan)
        return PipelineResult(plan=plan, report=report, metadata_available=bool(metadata))
