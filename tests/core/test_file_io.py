"""Tests for teatime.core.utils.file_io."""

import os

import pytest

from teatime.core.utils.file_io import read_if_exists, safe_write, sanitize_name


class TestSafeWrite:
    def test_creates_file(self, tmp_dir):
        path = os.path.join(tmp_dir, "sub", "file.md")
        safe_write(path, "hello")
        with open(path) as f:
            assert f.read() == "hello"

    def test_creates_parent_dirs(self, tmp_dir):
        path = os.path.join(tmp_dir, "a", "b", "c.md")
        safe_write(path, "nested")
        assert os.path.exists(path)

    def test_unicode(self, tmp_dir):
        path = os.path.join(tmp_dir, "tea.md")
        safe_write(path, "🍵 matcha — ok")
        assert read_if_exists(path) == "🍵 matcha — ok"


class TestReadIfExists:
    def test_missing_is_empty(self, tmp_dir):
        assert read_if_exists(os.path.join(tmp_dir, "missing.md")) == ""

    def test_directory_raises(self, tmp_dir):
        with pytest.raises(OSError):
            read_if_exists(tmp_dir)


class TestSanitizeName:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Work", "work"),
            ("  side project ", "side-project"),
            ("Q&A notes!", "qa-notes"),
            ("already_ok-1", "already_ok-1"),
            ("../etc", "etc"),
            ("???", ""),
        ],
    )
    def test_sanitize(self, raw, expected):
        assert sanitize_name(raw) == expected
