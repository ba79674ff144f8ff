"""
Pytest fixtures for variantgen tests.
"""

import pytest


@pytest.fixture
def build_dir(tmp_path):
    """Fixture providing an empty build directory."""
    path = tmp_path / "build"
    path.mkdir()
    return str(path)


@pytest.fixture
def landscape_image(tmp_path):
    """Fixture providing a 400x300 PNG source image."""
    from PIL import Image

    filepath = tmp_path / "in.png"
    img = Image.new('RGB', (400, 300), color='orange')
    img.save(filepath, format='PNG')
    return str(filepath)


@pytest.fixture
def transparent_image(tmp_path):
    """Fixture providing a 100x100 RGBA PNG with transparency."""
    from PIL import Image

    filepath = tmp_path / "alpha.png"
    img = Image.new('RGBA', (100, 100), color=(255, 0, 0, 128))
    img.save(filepath, format='PNG')
    return str(filepath)


@pytest.fixture
def corrupt_image(tmp_path):
    """Fixture providing a file that is not an image."""
    filepath = tmp_path / "broken.jpg"
    filepath.write_bytes(b'not an image')
    return str(filepath)


@pytest.fixture
def sunset(landscape_image):
    """Fixture providing the sunset source image in the landscapes map."""
    from variantgen.source_image import SourceImage

    return SourceImage(filepath=landscape_image, map='landscapes', name='sunset')


@pytest.fixture
def expected_relpaths():
    """Relative variant paths for landscapes/sunset, in catalog order."""
    return [
        'full/landscapes/sunset.jpg',
        'medium/landscapes/sunset.jpg',
        'thumbnail/landscapes/sunset.jpg',
        'webp/full/landscapes/sunset.webp',
        'webp/medium/landscapes/sunset.webp',
        'webp/thumbnail/landscapes/sunset.webp',
    ]


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')


@pytest.fixture
def list_files():
    """Fixture providing a helper that lists files under a root as relative posix paths."""
    import os

    def _list(root):
        found = []
        for dirpath, _, filenames in os.walk(root):
            for filename in filenames:
                rel = os.path.relpath(os.path.join(dirpath, filename), root)
                found.append(rel.replace(os.sep, "/"))
        return sorted(found)

    return _list
