from __future__ import annotations

import pytest

from fastfile.services.readiness_service import ReadinessCache, volume_root


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("C:\\data", "c"),
        ("d:/x", "d"),
        ('"E:\\quoted"', "e"),
        (" F:\\x", "f"),
        ("", None),
        (None, None),
        (":\\x", None),
        ("/usr/bin", None),
        ('" :\\x', None),
    ],
)
def test_volume_root(path, expected):
    assert volume_root(path) == expected


def test_lookup_probes_once_per_root():
    cache = ReadinessCache()
    calls = []

    def probe(root):
        calls.append(root)
        return root == "c"

    assert cache.lookup("C", probe) is True
    assert cache.lookup("c", probe) is True
    assert cache.lookup("D", probe) is False
    assert cache.lookup("d", probe) is False
    assert calls == ["c", "d"]
    assert cache.snapshot() == {"c": True, "d": False}


def test_entries_are_never_revalidated():
    cache = ReadinessCache()
    cache.lookup("c", lambda _root: False)

    assert cache.lookup("c", lambda _root: True) is False
    assert cache.get("C") is False
    assert "C" in cache
    assert "z" not in cache
    assert cache.get("z") is None


def test_failed_probe_leaves_no_entry():
    cache = ReadinessCache()

    def probe(_root):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        cache.lookup("c", probe)
    assert "c" not in cache
