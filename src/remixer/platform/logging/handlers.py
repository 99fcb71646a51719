"""Rich console handler for RE-MIXER processing events.

Where: platform/logging/handlers.py
What: Render structured organizer events with icons, colours and compact paths.
Why: Keep console output readable while the file log stays plain text.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, Final

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

LOG_PREFIX: Final[str] = "RE-MIXER"
ELLIPSIS: Final[str] = "…"

_PREFIX_STYLE: Final[Style] = Style(color="bright_black")
_SEPARATOR_STYLE: Final[Style] = Style(color="magenta")
_SEGMENT_STYLE: Final[Style] = Style(color="white")


def _pure(raw: str) -> PurePath:
    return PureWindowsPath(raw) if "\\" in raw else PurePosixPath(raw)


def compact_path(path: str, base: str | None = None, limit: int = 4) -> str:
    """Shorten ``path`` for display.

    The path is shown relative to ``base`` when it lies beneath it. Paths
    with more than ``limit`` segments keep only the last ``limit``, behind an
    ellipsis.
    """
    shown = _pure(path)
    if base:
        try:
            relative = shown.relative_to(_pure(base))
        except ValueError:
            relative = None
        if relative is not None and relative.parts:
            shown = relative

    sep = "\\" if isinstance(shown, PureWindowsPath) else "/"
    segments = [part for part in shown.parts if part != shown.anchor]
    if len(segments) > limit:
        return ELLIPSIS + sep + sep.join(segments[-limit:])
    return (shown.anchor + sep.join(segments)) or "."


def _styled_path(display: str) -> Text:
    text = Text()
    for char in display:
        style = _SEPARATOR_STYLE if char in "/\\" + ELLIPSIS else _SEGMENT_STYLE
        _ = text.append(char, style=style)
    return text


class RemixerRichHandler(RichHandler):
    """Rich handler that prefixes every line and styles processing events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "run.start": ("🚀", "cyan"),
        "run.complete": ("✅", "green"),
        "file.start": ("🎧", "blue"),
        "file.organized": ("🎉", "green"),
        "file.quarantined": ("📥", "yellow"),
        "file.skipped": ("↪️", "yellow"),
        "file.read_error": ("⛔", "red"),
        "field.missing": ("⚠️", "yellow"),
        "directory.create": ("📁", "magenta"),
    }
    _VERBS: ClassVar[dict[str, str]] = {
        "file.start": "Processing ",
        "file.organized": "Organized ",
        "file.quarantined": "Quarantined ",
        "file.skipped": "Skipped ",
        "file.read_error": "Unreadable ",
        "directory.create": "Creating ",
    }
    _RUN_COMPLETE_COUNTERS: ClassVar[tuple[str, ...]] = (
        "processed",
        "organized",
        "needing_intervention",
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.update(
            show_time=False,
            show_path=False,
            show_level=False,
            rich_tracebacks=True,
            markup=False,
        )
        super().__init__(*args, **kwargs)

    @staticmethod
    def _bracketed(items: list[str]) -> str:
        return f" [{', '.join(items)}]" if items else ""

    def _run_start(self, record: logging.LogRecord) -> str:
        details: list[str] = []
        total = getattr(record, "total_files", None)
        if isinstance(total, int):
            details.append(f"files={total}")
        profile = getattr(record, "profile", None)
        if profile:
            details.append(f"profile={profile}")
        return "Run start" + self._bracketed(details)

    def _run_complete(self, record: logging.LogRecord) -> str:
        counters = [
            f"{name}={getattr(record, name)}"
            for name in self._RUN_COMPLETE_COUNTERS
            if isinstance(getattr(record, name, None), int)
        ]
        return "Run complete" + self._bracketed(counters)

    def _file_event(self, event: str, record: logging.LogRecord, body: Text) -> None:
        sequence = getattr(record, "sequence", None)
        total = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            counter = f"{sequence}/{total}" if isinstance(total, int) and total > 0 else str(sequence)
            _ = body.append(f"[{counter}] ")
        _ = body.append(self._VERBS.get(event, ""))

        source = getattr(record, "source_path", None)
        target = getattr(record, "target_path", None)
        if source:
            _ = body.append_text(
                _styled_path(compact_path(str(source), getattr(record, "source_base_path", None)))
            )
        if target:
            if source:
                _ = body.append(" → ")
            _ = body.append_text(
                _styled_path(compact_path(str(target), getattr(record, "target_base_path", None)))
            )

        reason = getattr(record, "reason", None)
        if reason:
            _ = body.append(f" ({reason})")

    def _render_event(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, colour = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        body = Text(style=Style(color=colour))
        if event == "run.start":
            _ = body.append(self._run_start(record))
        elif event == "run.complete":
            _ = body.append(self._run_complete(record))
        elif event == "field.missing":
            _ = body.append(f"{getattr(record, 'field_name', 'Field')} metadata missing")
        else:
            self._file_event(event, record, body)

        text = Text(f"{LOG_PREFIX} ", style=_PREFIX_STYLE)
        _ = text.append(f"{icon} ", style=Style(color=colour, bold=True))
        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self._render_event(record)
        if event_text is not None:
            return event_text

        text = Text(f"{LOG_PREFIX} ", style=_PREFIX_STYLE)
        _ = text.append(message)
        return text


__all__ = ["LOG_PREFIX", "RemixerRichHandler", "compact_path"]
