"""
Runner - Generates or removes variants for a batch of source images.
"""

import asyncio
import logging
from typing import List, Optional

from .orchestrator import VariantOrchestrator
from .paths import resolve_all
from .run_progress import RunProgress
from .run_stats import RunStats
from .source_image import SourceImage


class Runner:
    """
    Drives a VariantOrchestrator over a list of source images.

    Images are processed one after another; the six variants of each image
    run concurrently. A failing image is counted and logged and the batch
    moves on to the next one.
    """

    def __init__(
        self,
        orchestrator: VariantOrchestrator,
        dry_run: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize runner.

        Args:
            orchestrator: Orchestrator that handles a single source image
            dry_run: If True, only report destination paths
            logger: Optional logger instance
        """
        self.orchestrator = orchestrator
        self.dry_run = dry_run
        self.logger = logger or logging.getLogger(__name__)
        self.stats = RunStats()
        self._stop_requested = False

    def stop(self) -> None:
        """Request the runner to stop after the current image."""
        self._stop_requested = True

    def generate_all(
        self,
        sources: List[SourceImage],
        progress: Optional[RunProgress] = None
    ) -> RunStats:
        """Generate all variants for each source image."""
        return asyncio.run(self._run('generate', sources, progress))

    def remove_all(
        self,
        sources: List[SourceImage],
        progress: Optional[RunProgress] = None
    ) -> RunStats:
        """Remove all variants for each source image."""
        return asyncio.run(self._run('remove', sources, progress))

    async def _run(
        self,
        action: str,
        sources: List[SourceImage],
        progress: Optional[RunProgress]
    ) -> RunStats:
        if self._stop_requested:
            self.logger.info("Stop was requested before the run started")
            self.stats = RunStats(total_to_process=0)
            return self.stats

        self.stats = RunStats(total_to_process=len(sources))

        mode_str = " [DRY RUN]" if self.dry_run else ""
        self.logger.info(
            f"Starting {action}: {len(sources)} images under {self.orchestrator.build_dir}{mode_str}"
        )

        for source in sources:
            if self._stop_requested:
                self.logger.info("Stop requested, halting run")
                break

            await self._process_source(action, source, progress)

            if progress:
                progress.on_progress_update(self.stats)

        self.logger.info(
            f"{action.capitalize()} complete: {self.stats.processed} done, "
            f"{self.stats.errors} errors ({self.stats.elapsed_seconds:.1f}s)"
        )

        return self.stats

    async def _process_source(
        self,
        action: str,
        source: SourceImage,
        progress: Optional[RunProgress]
    ) -> bool:
        """Process a single source image."""
        if self.dry_run:
            paths = list(resolve_all(self.orchestrator.build_dir, source).values())
            if progress:
                progress.on_dry_run(source, action, paths)
            else:
                for path in paths:
                    self.logger.info(f"[DRY RUN] Would {action}: {path}")
            self.stats.processed += 1
            return True

        try:
            if action == 'generate':
                self.stats.record_generated(await self.orchestrator.generate(source))
            else:
                self.stats.record_removed(await self.orchestrator.remove(source))

            if progress:
                progress.on_file_processed(source, action, success=True)
            else:
                self.logger.info(
                    f"{action.capitalize()}d: {source.map}/{source.name} "
                    f"[{self.stats.processed}/{self.stats.total_to_process}]"
                )

            return True

        except Exception as e:
            error_msg = f"Error processing {source.filepath}: {e}"
            self.logger.error(error_msg)
            self.stats.record_error(error_msg)

            if progress:
                progress.on_file_processed(source, action, success=False, error=str(e))

            return False
