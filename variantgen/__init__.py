"""
Image Variant Generation Package

Derives six responsive variants (full, medium, thumbnail, each as JPG and
WebP) from a source image under a build directory, and removes them again.
"""

__version__ = "1.0.0"

from .catalog import Encoding, Variant, Dimensions, dimensions_of, directory_of, combinations
from .source_image import SourceImage
from .paths import resolve, resolve_all
from .errors import VariantError, TranscodeError, DirectoryError, DeletionError
from .transcoder import Transcoder
from .filesystem import ensure_dir, remove_file
from .orchestrator import VariantOrchestrator
from .run_stats import RunStats
from .run_progress import RunProgress
from .runner import Runner
from .config import BuildConfig

__all__ = [
    "Encoding",
    "Variant",
    "Dimensions",
    "dimensions_of",
    "directory_of",
    "combinations",
    "SourceImage",
    "resolve",
    "resolve_all",
    "VariantError",
    "TranscodeError",
    "DirectoryError",
    "DeletionError",
    "Transcoder",
    "ensure_dir",
    "remove_file",
    "VariantOrchestrator",
    "RunStats",
    "RunProgress",
    "Runner",
    "BuildConfig",
]
