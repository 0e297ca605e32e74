"""Shared test fixtures for teatime."""

import os
import tempfile

import pytest

from teatime.journal.local import MarkdownNoteStore


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "logging": {"level": "DEBUG"},
        "editor": {"command": "vim"},
        "display": {"render_markdown": False},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def store(tmp_path):
    """A markdown store rooted in a fresh temp dir, with one project."""
    s = MarkdownNoteStore(tmp_path / "teatime")
    s.create_project("journal")
    return s
