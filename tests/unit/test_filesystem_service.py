from __future__ import annotations

import os
import stat
from datetime import datetime
from types import SimpleNamespace

import pytest

from fastfile.errors import NotFoundError
from fastfile.services import filesystem_service
from fastfile.services.filesystem_service import LocalFileSystem


def _make_tree(root):
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "a.txt").write_text("alpha", encoding="utf-8")
    (root / "b.txt").write_text("b", encoding="utf-8")
    (root / "sub" / "c.txt").write_text("", encoding="utf-8")
    return root


def test_existence_checks(tmp_path):
    root = _make_tree(tmp_path)
    fs = LocalFileSystem()

    assert fs.directory_exists(str(root / "sub")) is True
    assert fs.directory_exists(str(root / "a.txt")) is False
    assert fs.file_exists(str(root / "a.txt")) is True
    assert fs.file_exists(str(root / "sub")) is False
    assert fs.file_exists(str(root / "missing")) is False


def test_listing_top_level_and_recursive(tmp_path):
    root = _make_tree(tmp_path)
    fs = LocalFileSystem()

    assert sorted(fs.get_files(str(root))) == [str(root / "a.txt"), str(root / "b.txt")]
    assert sorted(fs.get_files(str(root), recursive=True)) == sorted(
        [str(root / "a.txt"), str(root / "b.txt"), str(root / "sub" / "c.txt")]
    )
    assert fs.get_directories(str(root)) == [str(root / "sub")]
    assert sorted(fs.get_directories(str(root), recursive=True)) == [
        str(root / "sub"),
        str(root / "sub" / "deep"),
    ]


def test_listing_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        LocalFileSystem().get_files(str(tmp_path / "missing"))


def test_creation_time_checks_kind(tmp_path):
    root = _make_tree(tmp_path)
    fs = LocalFileSystem()

    assert isinstance(fs.get_file_creation_time(str(root / "a.txt")), datetime)
    assert isinstance(fs.get_directory_creation_time(str(root / "sub")), datetime)
    with pytest.raises(NotFoundError):
        fs.get_file_creation_time(str(root / "sub"))
    with pytest.raises(NotFoundError):
        fs.get_directory_creation_time(str(root / "a.txt"))


def test_creation_time_prefers_birthtime(monkeypatch):
    fake_os = SimpleNamespace(
        stat=lambda _path: SimpleNamespace(st_birthtime=100.0, st_ctime=200.0)
    )
    monkeypatch.setattr(filesystem_service, "os", fake_os)
    assert filesystem_service._creation_timestamp("x") == datetime.fromtimestamp(100.0)


def test_file_sizes(tmp_path):
    root = _make_tree(tmp_path)
    sizes = sorted(LocalFileSystem().get_file_sizes(str(root), recursive=True))

    assert sizes == sorted(
        [
            (5, str(root / "a.txt")),
            (1, str(root / "b.txt")),
            (0, str(root / "sub" / "c.txt")),
        ]
    )


def test_system_attribute(monkeypatch):
    fs = LocalFileSystem()
    system_stat = SimpleNamespace(st_file_attributes=stat.FILE_ATTRIBUTE_SYSTEM)
    monkeypatch.setattr(
        filesystem_service, "os", SimpleNamespace(stat=lambda _path: system_stat)
    )
    assert fs.has_system_attribute("C:\\Windows") is True

    monkeypatch.setattr(
        filesystem_service, "os", SimpleNamespace(stat=lambda _path: SimpleNamespace())
    )
    assert fs.has_system_attribute("/tmp") is False


def test_pathmod_is_host_flavour():
    assert LocalFileSystem.pathmod is os.path
