"""
Catalog - Fixed size variants, encodings and their output directories.
"""

from enum import Enum
from types import MappingProxyType
from typing import Iterator, NamedTuple, Optional, Tuple


class Encoding(str, Enum):
    """Output encodings. Values double as file extensions."""
    JPG = 'jpg'
    WEBP = 'webp'


class Variant(str, Enum):
    """Output size variants."""
    FULL = 'full'
    MEDIUM = 'medium'
    THUMBNAIL = 'thumbnail'


class Dimensions(NamedTuple):
    """
    Target dimensions for a variant.

    Attributes:
        width: Target width in pixels
        height: Target height, or None to keep the source aspect ratio
    """
    width: int
    height: Optional[int] = None

    @property
    def forced(self) -> bool:
        """True when both sides are fixed and the resize ignores aspect ratio."""
        return self.height is not None


VARIANT_DIMENSIONS = MappingProxyType({
    Variant.FULL: Dimensions(1920, 1080),
    Variant.MEDIUM: Dimensions(512),
    Variant.THUMBNAIL: Dimensions(200),
})

VARIANT_DIRS = MappingProxyType({
    Encoding.JPG: MappingProxyType({
        Variant.FULL: 'full',
        Variant.MEDIUM: 'medium',
        Variant.THUMBNAIL: 'thumbnail',
    }),
    Encoding.WEBP: MappingProxyType({
        Variant.FULL: 'webp/full',
        Variant.MEDIUM: 'webp/medium',
        Variant.THUMBNAIL: 'webp/thumbnail',
    }),
})

# Pillow format names
PIL_FORMATS = MappingProxyType({
    Encoding.JPG: 'JPEG',
    Encoding.WEBP: 'WEBP',
})

ENCODING_EXTENSIONS = MappingProxyType({
    encoding: f'.{encoding.value}' for encoding in Encoding
})


def dimensions_of(variant: Variant) -> Dimensions:
    """Get target dimensions for a variant."""
    return VARIANT_DIMENSIONS[variant]


def directory_of(encoding: Encoding, variant: Variant) -> str:
    """Get the output directory, relative to the build root, for an encoding and variant."""
    return VARIANT_DIRS[encoding][variant]


def combinations() -> Iterator[Tuple[Encoding, Variant]]:
    """Yield every (encoding, variant) pair, JPG first."""
    for encoding in Encoding:
        for variant in Variant:
            yield encoding, variant
