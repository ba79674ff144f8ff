"""
VariantOrchestrator - Generates and removes all variants of a source image.
"""

import asyncio
import logging
import os
from typing import Callable, Dict, Iterable, Optional, Tuple

from .catalog import Encoding, Variant, combinations, dimensions_of
from .filesystem import ensure_dir, remove_file
from .paths import resolve
from .source_image import SourceImage
from .transcoder import Transcoder

VariantKey = Tuple[Encoding, Variant]


class VariantOrchestrator:
    """
    Fans generate/remove out over (encoding, variant) pairs.

    The per-variant tasks run concurrently. The first failure is raised
    to the caller; the remaining tasks are not cancelled and run to
    completion on their own. No rollback is attempted, so a failed
    generate can leave some variant files behind.
    """

    def __init__(
        self,
        build_dir: str,
        transcoder: Optional[Transcoder] = None,
        ensure_dir: Callable[[str], object] = ensure_dir,
        remove_file: Callable[[str], bool] = remove_file,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize orchestrator.

        Args:
            build_dir: Root directory for all variant output
            transcoder: Transcoder instance (default: Pillow Transcoder)
            ensure_dir: Recursive, idempotent directory creation
            remove_file: Delete-if-present file removal, True if a file was deleted
            logger: Optional logger instance
        """
        self.build_dir = build_dir
        self.logger = logger or logging.getLogger(__name__)
        self.transcoder = transcoder or Transcoder(logger=self.logger)
        self._ensure_dir = ensure_dir
        self._remove_file = remove_file

    async def generate(self, source: SourceImage) -> Dict[VariantKey, str]:
        """
        Generate all six variants of a source image.

        Returns:
            Destination path per (encoding, variant), in catalog order

        Raises:
            TranscodeError, DirectoryError: First failure among the variants
        """
        self.logger.debug(f"Generating variants: {source.map}/{source.name}")
        return await self._fan_out('generate', source, combinations())

    async def generate_encoding(self, source: SourceImage, encoding: Encoding) -> Dict[VariantKey, str]:
        """Generate the three sizes of a single encoding."""
        return await self._fan_out('generate', source, ((encoding, variant) for variant in Variant))

    async def remove(self, source: SourceImage) -> Dict[VariantKey, bool]:
        """
        Remove all six variants of a source image.

        Missing files are ignored, so removing twice is not an error.

        Returns:
            Per (encoding, variant), True if a file was deleted, False if it was absent

        Raises:
            DeletionError: First failure among the variants
        """
        self.logger.debug(f"Removing variants: {source.map}/{source.name}")
        return await self._fan_out('remove', source, combinations())

    async def remove_encoding(self, source: SourceImage, encoding: Encoding) -> Dict[VariantKey, bool]:
        """Remove the three sizes of a single encoding."""
        return await self._fan_out('remove', source, ((encoding, variant) for variant in Variant))

    async def generate_variant(self, source: SourceImage, encoding: Encoding, variant: Variant) -> str:
        """Generate one variant file and return its path."""
        dest_path = resolve(self.build_dir, source, encoding, variant)

        await asyncio.to_thread(self._ensure_dir, os.path.dirname(dest_path))

        return await asyncio.to_thread(
            self.transcoder.transcode,
            os.path.abspath(source.filepath),
            dest_path,
            dimensions_of(variant),
        )

    async def remove_variant(self, source: SourceImage, encoding: Encoding, variant: Variant) -> bool:
        """Remove one variant file if present. True if a file was deleted."""
        dest_path = resolve(self.build_dir, source, encoding, variant)
        return bool(await asyncio.to_thread(self._remove_file, dest_path))

    async def _fan_out(self, action: str, source: SourceImage, pairs: Iterable[VariantKey]) -> dict:
        """Run one task per pair; gather raises the first failure without cancelling the rest."""
        pairs = list(pairs)
        step = self.generate_variant if action == 'generate' else self.remove_variant
        results = await asyncio.gather(*(
            self._supervised(step(source, encoding, variant), action, source, encoding, variant)
            for encoding, variant in pairs
        ))
        return dict(zip(pairs, results))

    async def _supervised(self, task, action: str, source: SourceImage, encoding: Encoding, variant: Variant):
        """Log a task failure before handing it on, so late sibling failures are visible."""
        try:
            return await task
        except Exception as e:
            self.logger.error(
                f"Failed to {action} {encoding.value}/{variant.value} for {source.map}/{source.name}: {e}"
            )
            raise
