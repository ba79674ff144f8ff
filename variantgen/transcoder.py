"""
Transcoder - Resizes and re-encodes a source image into a variant file.
"""

import logging
import os
from typing import Optional, Tuple

from PIL import Image

from .catalog import Dimensions, Encoding, PIL_FORMATS
from .errors import TranscodeError


class Transcoder:
    """
    Produces variant files from source images using Pillow.

    Color profiles and EXIF data are not carried over to the output.
    """

    EXTENSION_ENCODINGS = {
        '.jpg': Encoding.JPG,
        '.jpeg': Encoding.JPG,
        '.webp': Encoding.WEBP,
    }

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize transcoder.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def transcode(self, source_path: str, dest_path: str, dimensions: Dimensions) -> str:
        """
        Resize a source image and write it to dest_path.

        When dimensions.height is set the image is forced to exactly
        width x height. Otherwise height follows the source aspect ratio.
        An existing file at dest_path is overwritten.

        Args:
            source_path: Path of the source image
            dest_path: Output path; its extension selects the encoding
            dimensions: Target dimensions

        Returns:
            dest_path

        Raises:
            TranscodeError: Source unreadable or destination unwritable
        """
        output_format = self._get_output_format(dest_path)

        try:
            with Image.open(source_path) as img:
                img = self._convert_color_mode(img)
                size = self.target_size(img.size, dimensions)
                resized = img.resize(size, Image.Resampling.LANCZOS)
                for key in ('icc_profile', 'exif'):
                    resized.info.pop(key, None)
                resized.save(dest_path, format=output_format)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            self.logger.error(f"Error transcoding {source_path} -> {dest_path}: {e}")
            raise TranscodeError(f"Cannot transcode {source_path}: {e}", dest_path) from e

        self.logger.debug(f"Wrote {dest_path} ({size[0]}x{size[1]})")
        return dest_path

    @staticmethod
    def target_size(source_size: Tuple[int, int], dimensions: Dimensions) -> Tuple[int, int]:
        """Compute output size for a source size and target dimensions."""
        if dimensions.forced:
            return dimensions.width, dimensions.height
        src_w, src_h = source_size
        height = max(1, round(src_h * dimensions.width / src_w))
        return dimensions.width, height

    def _get_output_format(self, dest_path: str) -> str:
        """Determine Pillow output format from the destination extension."""
        ext = os.path.splitext(dest_path)[1].lower()
        encoding = self.EXTENSION_ENCODINGS.get(ext)
        if encoding is None:
            raise TranscodeError(f"Unsupported output extension: {ext or '(none)'}", dest_path)
        return PIL_FORMATS[encoding]

    def _convert_color_mode(self, img: Image.Image) -> Image.Image:
        """Convert image to RGB, flattening transparency onto white."""
        if img.mode in ('RGBA', 'LA', 'P'):
            img = img.convert('RGBA')
            background = Image.new('RGB', img.size, (255, 255, 255))
            background.paste(img, mask=img.split()[-1])
            return background
        elif img.mode != 'RGB':
            return img.convert('RGB')
        return img
