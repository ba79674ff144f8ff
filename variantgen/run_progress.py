"""
RunProgress - Per-image output and periodic summaries for batch runs.
"""

import logging
from typing import Iterable, Optional

from .run_stats import RunStats
from .source_image import SourceImage


class RunProgress:
    """
    Prints one line per source image when show_files is set, otherwise logs
    a summary every log_interval images.
    """

    def __init__(
        self,
        show_files: bool = False,
        log_interval: int = 100,
        logger: Optional[logging.Logger] = None
    ):
        self.show_files = show_files
        self.log_interval = log_interval
        self.logger = logger or logging.getLogger(__name__)
        self.last_logged = 0

    def on_file_processed(
        self,
        source: SourceImage,
        action: str,
        success: bool,
        error: Optional[str] = None
    ) -> None:
        """
        Report one source image.

        Args:
            source: The source image
            action: 'generate' or 'remove'
            success: Whether every variant succeeded
            error: Error message (if failed)
        """
        if not self.show_files:
            return
        if success:
            verb = 'generated' if action == 'generate' else 'removed'
            print(f"  [OK] {source.filepath} -> {source.map}/{source.name} variants {verb}")
        else:
            print(f"  [ERROR] {source.filepath} -> {error or 'failed'}")

    def on_dry_run(self, source: SourceImage, action: str, paths: Iterable[str]) -> None:
        """Report the destination paths a dry run would touch."""
        if self.show_files:
            print(f"  [DRY RUN] {source.filepath} -> would {action}:")
            for path in paths:
                print(f"      {path}")

    def on_progress_update(self, stats: RunStats) -> None:
        """Log a summary once log_interval more images have completed."""
        done = stats.processed + stats.errors

        if self.show_files or done - self.last_logged < self.log_interval:
            return
        self.last_logged = done
        self.logger.info(
            f"Progress: {stats.processed} images, {stats.files_generated} files written, "
            f"{stats.files_removed} removed, {stats.errors} errors "
            f"({stats.images_per_minute:.1f} images/min, {stats.remaining_count} left)"
        )
