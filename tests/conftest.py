from pathlib import Path

import pytest
from PIL import Image

@pytest.fixture
def make_photo():
    """Write a solid-colour photo and return its path."""
    def _make(path: Path, size=(400, 200), color=(200, 30, 30)):
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = 'RGBA' if path.suffix.lower() == '.png' else 'RGB'
        fill = color + (255,) if mode == 'RGBA' else color
        Image.new(mode, size, fill).save(path)
        return path
    return _make

@pytest.fixture
def photo_dir(tmp_path, make_photo):
    """Source directory holding two JPEGs and one PNG."""
    source = tmp_path / 'photos'
    make_photo(source / 'a.jpg')
    make_photo(source / 'b.JPG', size=(300, 600))
    make_photo(source / 'c.png')
    return source

@pytest.fixture
def canned_prompt():
    """Build prompt functions that replay canned answers."""
    def _build(*replies):
        remaining = iter(replies)
        asked = []

        def prompt(question):
            asked.append(question)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        prompt.asked = asked
        return prompt
    return _build
