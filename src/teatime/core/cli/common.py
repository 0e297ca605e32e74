"""Shared setup logic for the CLI."""

from __future__ import annotations

from pathlib import Path

TEATIME_DIR = Path.home() / ".teatime"
CONFIG_PATH = TEATIME_DIR / "config.yaml"


def load_config():
    """Load config from ~/.teatime/config.yaml (missing file is fine)."""
    from teatime.core.config import Config

    return Config(config_file=str(CONFIG_PATH))


def configure_logging(config) -> None:
    """Apply the logging.* config keys to loguru."""
    from teatime.core.utils.logging import setup_logging

    log_file = config.get("logging.file", "") or None
    if log_file:
        log_file = str(Path(log_file).expanduser())
    setup_logging(level=config.get("logging.level", "WARNING"), log_file=log_file)


def create_app(config, root: Path = TEATIME_DIR):
    """Build the JournalApp over the markdown store at ``root``."""
    from teatime.journal.config import JournalSettings
    from teatime.journal.local import MarkdownNoteStore
    from teatime.tui.app import JournalApp

    store = MarkdownNoteStore(root)
    return JournalApp(store, JournalSettings.from_config(config))
