"""
RunStats - Per-variant file counts for a batch generate or remove run.
"""

import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .catalog import Encoding, Variant


def _label(key: Tuple[Encoding, Variant]) -> str:
    encoding, variant = key
    return f"{encoding.value}/{variant.value}"


@dataclass
class RunStats:
    """
    Outcome of a batch run.

    Attributes:
        total_to_process: Source images in the batch
        processed: Source images whose variants all succeeded
        errors: Source images that failed
        generated: Files written, keyed by "encoding/variant"
        removed: Files deleted, keyed by "encoding/variant"
        absent: Files already missing at removal, keyed by "encoding/variant"
        start_time: Start timestamp
        error_details: One message per failed source image
    """
    total_to_process: int = 0
    processed: int = 0
    errors: int = 0
    generated: Counter = field(default_factory=Counter)
    removed: Counter = field(default_factory=Counter)
    absent: Counter = field(default_factory=Counter)
    start_time: float = field(default_factory=time.time)
    error_details: List[str] = field(default_factory=list)

    def record_generated(self, results: Dict[Tuple[Encoding, Variant], str]) -> None:
        """Count the files one generate call wrote."""
        self.processed += 1
        self.generated.update(_label(key) for key in results)

    def record_removed(self, results: Dict[Tuple[Encoding, Variant], bool]) -> None:
        """Count deleted and already-absent files of one remove call."""
        self.processed += 1
        for key, deleted in results.items():
            (self.removed if deleted else self.absent)[_label(key)] += 1

    def record_error(self, message: str) -> None:
        self.errors += 1
        self.error_details.append(message)

    @property
    def files_generated(self) -> int:
        return sum(self.generated.values())

    @property
    def files_removed(self) -> int:
        return sum(self.removed.values())

    @property
    def elapsed_seconds(self) -> float:
        return time.time() - self.start_time

    @property
    def images_per_minute(self) -> float:
        elapsed = self.elapsed_seconds
        return self.processed / elapsed * 60 if elapsed > 0 else 0.0

    @property
    def remaining_count(self) -> int:
        return self.total_to_process - self.processed - self.errors
