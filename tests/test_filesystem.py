import os

import pytest

from templatetree.filesystem import (
    FileSystem,
    MemoryFileSystem,
    OSFileSystem,
    ResourceFileSystem,
)


def test_implementations_satisfy_protocol(tmp_path):
    assert isinstance(OSFileSystem(), FileSystem)
    assert isinstance(MemoryFileSystem(), FileSystem)
    assert isinstance(ResourceFileSystem(tmp_path), FileSystem)


def test_os_list_dir_is_sorted(tmp_path):
    for name in ("b.txt", "a.txt", "c"):
        (tmp_path / name).write_text("x")
    (tmp_path / "sub").mkdir()

    assert OSFileSystem().list_dir(str(tmp_path)) == [
        ("a.txt", False),
        ("b.txt", False),
        ("c", False),
        ("sub", True),
    ]


def test_os_join_uses_native_separator():
    assert OSFileSystem().join("templates", "a", "x.tmpl") == os.path.join(
        "templates", "a", "x.tmpl"
    )
    assert OSFileSystem().join(".", "x.tmpl") == "x.tmpl"


def test_os_stat_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        OSFileSystem().stat(str(tmp_path / "missing"))


def test_memory_tree_listing():
    fs = MemoryFileSystem(
        {"site/index.tmpl": "i", "site/b/x.tmpl": "bx", "site/a/x.tmpl": b"ax"}
    )

    assert fs.list_dir("site") == [("a", True), ("b", True), ("index.tmpl", False)]
    assert fs.list_dir(".") == [("site", True)]
    assert fs.read_bytes("site/a/x.tmpl") == b"ax"
    assert fs.read_bytes("site/b/x.tmpl") == b"bx"


def test_memory_errors():
    fs = MemoryFileSystem({"a/b.txt": "x"})

    with pytest.raises(FileNotFoundError):
        fs.list_dir("missing")
    with pytest.raises(NotADirectoryError):
        fs.list_dir("a/b.txt")
    with pytest.raises(IsADirectoryError):
        fs.read_bytes("a")
    with pytest.raises(FileNotFoundError):
        fs.read_bytes("a/c.txt")


@pytest.mark.parametrize("path", ["/abs/x", "../x", "a/../../x"])
def test_memory_rejects_paths_outside_tree(path):
    with pytest.raises(ValueError):
        MemoryFileSystem({path: "x"})


def test_memory_copy_file(tmp_path):
    fs = MemoryFileSystem({"img/logo.png": b"\x00\x01\xff"})
    fs.copy_file("img/logo.png", tmp_path / "logo.png")

    assert (tmp_path / "logo.png").read_bytes() == b"\x00\x01\xff"


def test_resource_file_system_over_directory(tmp_path):
    (tmp_path / "tpl" / "inner").mkdir(parents=True)
    (tmp_path / "tpl" / "inner" / "x.tmpl").write_bytes(b"hello")
    (tmp_path / "tpl" / "a.txt").write_bytes(b"a")

    fs = ResourceFileSystem(tmp_path)

    assert fs.stat("tpl").is_dir
    assert fs.list_dir("tpl") == [("a.txt", False), ("inner", True)]
    assert fs.read_bytes("tpl/inner/x.tmpl") == b"hello"
    with pytest.raises(FileNotFoundError):
        fs.stat("tpl/missing")

    fs.copy_file("tpl/a.txt", tmp_path / "copy.txt")
    assert (tmp_path / "copy.txt").read_bytes() == b"a"


def test_resource_file_system_over_package():
    fs = ResourceFileSystem("templatetree")

    names = [name for name, _ in fs.list_dir(".")]
    assert "__init__.py" in names
    assert "rendering" in names


def test_memory_file_and_directory_cannot_share_a_path():
    fs = MemoryFileSystem({"a/b.txt": "x"})

    with pytest.raises(IsADirectoryError):
        fs.add("a", "y")
    with pytest.raises(NotADirectoryError):
        fs.add("a/b.txt/c", "z")
