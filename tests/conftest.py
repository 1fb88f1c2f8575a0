"""
Shared fixtures for dutree tests.
Creates isolated temporary directories with controlled test trees.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dutree' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def usage_tree(temp_dir) -> Dict[str, Path]:
    """
    R/
      D1/F1          100 bytes
      D2/S1/         empty directory
      D2/S2/F2        50 bytes
      D2/F3           30 bytes
    """
    paths = {"R": temp_dir}

    paths["D1"] = temp_dir / "D1"
    paths["D1"].mkdir()
    paths["F1"] = paths["D1"] / "F1"
    paths["F1"].write_bytes(b"a" * 100)

    paths["D2"] = temp_dir / "D2"
    paths["D2"].mkdir()
    paths["S1"] = paths["D2"] / "S1"
    paths["S1"].mkdir()
    paths["S2"] = paths["D2"] / "S2"
    paths["S2"].mkdir()
    paths["F2"] = paths["S2"] / "F2"
    paths["F2"].write_bytes(b"b" * 50)
    paths["F3"] = paths["D2"] / "F3"
    paths["F3"].write_bytes(b"c" * 30)

    return paths


@pytest.fixture
def duplicate_tree(temp_dir) -> Dict[str, Path]:
    """
    Two files with content "abc" in different directories and one "xyz" file.
    """
    files = {}

    first = temp_dir / "first"
    first.mkdir()
    second = temp_dir / "second" / "nested"
    second.mkdir(parents=True)

    files["abc_1"] = first / "copy.txt"
    files["abc_1"].write_bytes(b"abc")
    files["abc_2"] = second / "other_name.bin"
    files["abc_2"].write_bytes(b"abc")
    files["xyz"] = first / "unique.txt"
    files["xyz"].write_bytes(b"xyz")

    return files


@pytest.fixture
def media_tree(temp_dir) -> Dict[str, Path]:
    """Mixed extensions, including a .jpg buried below a directory without any."""
    files = {}

    photos = temp_dir / "photos"
    (photos / "2024" / "summer").mkdir(parents=True)
    docs = temp_dir / "docs"
    docs.mkdir()

    files["beach"] = photos / "2024" / "summer" / "beach.jpg"
    files["beach"].write_bytes(b"J" * 300)
    files["cover"] = photos / "cover.jpg"
    files["cover"].write_bytes(b"K" * 200)
    files["raw"] = photos / "cover.jpeg"
    files["raw"].write_bytes(b"L" * 10)
    files["notes"] = docs / "notes.txt"
    files["notes"].write_bytes(b"N" * 40)
    files["noext"] = docs / "jpg"
    files["noext"].write_bytes(b"M" * 5)

    return files


@pytest.fixture
def deep_tree(temp_dir) -> Dict[str, Path]:
    """
    R/a/a/.../a/leaf   one 3-byte file, nested deeper than the recursion limit.
    Built and removed one level at a time.
    """
    depth = sys.getrecursionlimit() + 100
    levels = []
    path = temp_dir
    for _ in range(depth):
        path = path / "a"
        path.mkdir()
        levels.append(path)
    leaf = path / "leaf.txt"
    leaf.write_bytes(b"end")

    yield {"R": temp_dir, "top": levels[0], "bottom": levels[-1], "leaf": leaf, "depth": depth}

    leaf.unlink()
    for level in reversed(levels):
        level.rmdir()
