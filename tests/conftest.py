"""Shared fixtures: sample files and directory trees."""

from __future__ import annotations

from pathlib import Path

import pytest

POEM = """\
I'm nobody! Who are you?
Are you nobody, too?
Then there's a pair of us - don't tell!
They'd banish us, you know.

How dreary to be somebody!
How public, like a frog
To tell your name the livelong day
To an admiring bog!
"""


@pytest.fixture
def poem(tmp_path: Path) -> Path:
    """A single text file with a few matches for 'you'."""
    path = tmp_path / "poem.txt"
    path.write_text(POEM)
    return path


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Directory with one matching file, one non-matching file and a nested dir.

    root/
      a.txt          one line with "needle"
      b.txt          no match
      empty/         no files
      nested/
        c.txt        "needle" three times, once capitalised
        d.txt        no match
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("haystack\nfound the needle\n")
    (root / "b.txt").write_text("just hay\n")
    (root / "empty").mkdir()
    nested = root / "nested"
    nested.mkdir()
    (nested / "c.txt").write_text("needle one\nnothing\nNeedle two\nneedle three\n")
    (nested / "d.txt").write_text("straw\n")
    return root
