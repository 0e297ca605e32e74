"""Front-end settings for the interactive journal.

A plain data container with sensible defaults. Build it from the layered
``Config`` with ``JournalSettings.from_config`` or pass values directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from teatime.core.config import Config


@dataclass
class JournalSettings:
    """Settings for the interactive journal.

    Attributes:
        editor: Editor command for writing notes. Empty means $VISUAL/$EDITOR.
        render_markdown: Render notes and reference bundles as markdown.
        show_reminders: Scan for missing summaries on the project view.
    """

    editor: str = ""
    render_markdown: bool = True
    show_reminders: bool = True

    @classmethod
    def from_config(cls, config: Config) -> JournalSettings:
        return cls(
            editor=config.get("editor.command", "") or "",
            render_markdown=config.get_bool("display.render_markdown", True),
            show_reminders=config.get_bool("display.show_reminders", True),
        )
