"""
SourceImage - A source image and where its variants belong.
"""

import os
from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class SourceImage:
    """
    A source image to derive variants from.

    Attributes:
        filepath: Path to the source file
        map: Grouping subdirectory (album, category) used in output paths
        name: Output filename stem, without extension
    """
    filepath: str
    map: str
    name: str

    @classmethod
    def from_file(cls, filepath: str, map: str, name: Optional[str] = None) -> 'SourceImage':
        """Build a SourceImage, naming it after the file's stem unless a name is given."""
        if name is None:
            name = os.path.splitext(os.path.basename(filepath))[0]
        return cls(filepath=filepath, map=map, name=name)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'SourceImage':
        return cls(**data)
