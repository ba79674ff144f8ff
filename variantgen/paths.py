"""
Destination path derivation for image variants.
"""

import os
from typing import Dict, Tuple

from .catalog import Encoding, Variant, ENCODING_EXTENSIONS, combinations, directory_of
from .source_image import SourceImage

SEPARATORS = "/\\"


def resolve(build_dir: str, source: SourceImage, encoding: Encoding, variant: Variant) -> str:
    """
    Get the absolute destination path of one variant.

    Layout is ``<build_dir>/<variant dir>/<map>/<name>.<ext>``, e.g.
    ``build/webp/medium/landscapes/sunset.webp``.
    """
    # Leading separators would make os.path.join discard the build root
    map_dir = source.map.lstrip(SEPARATORS)
    filename = f"{source.name.lstrip(SEPARATORS)}{ENCODING_EXTENSIONS[encoding]}"
    return os.path.abspath(
        os.path.join(build_dir, directory_of(encoding, variant), map_dir, filename)
    )


def resolve_all(build_dir: str, source: SourceImage) -> Dict[Tuple[Encoding, Variant], str]:
    """Get destination paths for all six variants of a source image."""
    return {
        (encoding, variant): resolve(build_dir, source, encoding, variant)
        for encoding, variant in combinations()
    }
