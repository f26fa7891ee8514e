"""
Filesystem browser for picking a file.

Lists one directory at a time (directories first, hidden entries skipped),
optionally restricted to a set of file extensions. Typing filters the
listing; arrow keys, Enter and Home move around the tree.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path

from ...core.formatting import sort_by_name
from ...core.logging import debug_log
from ...core.paths import get_home_dir, is_root_dir, shorten_home
from ..primitives.keyboard_input import (
    KeyEvent,
    KEY_CTRL_C,
    KEY_ENTER,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_HOME,
    KEY_BACKSPACE,
    KEY_ESC,
)
from ..primitives.terminal import TerminalIO
from ..primitives.theme import RenderContext, DEFAULT_CONTEXT
from .prompt import Outcome, CONTINUE, ABORTED, submitted, run_prompt
from .select import filter_indices, clamp_selection

DEFAULT_MAX_VISIBLE = 12
PARENT_ENTRY_NAME = ".."
HELP_LINE = "↑/↓ navigate • Enter select • ← parent • → enter dir • Type to filter • Esc clear"


@dataclass(frozen=True)
class Entry:
    """A file or directory in the current listing."""
    name: str
    path: Path
    is_dir: bool


def _extension_matches(name: str, extensions: tuple[str, ...]) -> bool:
    ext = os.path.splitext(name)[1].lower()
    return any(ext == allowed.lower() for allowed in extensions)


def list_entries(directory: Path, extensions: tuple[str, ...] = ()) -> tuple[Entry, ...]:
    """
    List a directory for browsing.

    Hidden entries are skipped. When extensions are given, only files with a
    matching extension (case-insensitive) are kept; directories always are.
    Directories come first, each group sorted case-insensitively, and a ".."
    entry leads the list unless directory is a filesystem root.
    """
    directory = Path(directory)
    entries = []
    if not is_root_dir(directory):
        entries.append(Entry(PARENT_ENTRY_NAME, directory.parent, True))

    try:
        children = list(os.scandir(directory))
    except OSError as e:
        debug_log(f"BROWSER | cannot list {directory}: {e}")
        return tuple(entries)

    dirs = []
    files = []
    for child in children:
        if child.name.startswith("."):
            continue
        try:
            is_dir = child.is_dir()
        except OSError:
            is_dir = False
        entry = Entry(child.name, directory / child.name, is_dir)
        if is_dir:
            dirs.append(entry)
        elif not extensions or _extension_matches(child.name, extensions):
            files.append(entry)

    entries.extend(sort_by_name(dirs, key=lambda e: e.name))
    entries.extend(sort_by_name(files, key=lambda e: e.name))
    return tuple(entries)


def adjust_scroll(selected: int, scroll_offset: int, max_visible: int) -> int:
    """Scroll offset that keeps selected inside the visible window."""
    if selected < scroll_offset:
        return selected
    if selected >= scroll_offset + max_visible:
        return selected - max_visible + 1
    return scroll_offset


@dataclass(frozen=True)
class BrowserModel:
    label: str
    current_dir: Path
    all_entries: tuple[Entry, ...] = ()
    filtered_entries: tuple[Entry, ...] = ()
    filter_text: str = ""
    selected: int = 0
    scroll_offset: int = 0
    extensions: tuple[str, ...] = ()
    max_visible: int = DEFAULT_MAX_VISIBLE

    @classmethod
    def create(cls, label: str, start_dir: Path, extensions=(), max_visible: int = DEFAULT_MAX_VISIBLE) -> "BrowserModel":
        model = cls(label, Path(start_dir), extensions=tuple(extensions), max_visible=max(1, max_visible))
        return model.navigate(model.current_dir)

    @property
    def selected_entry(self) -> Entry | None:
        if not self.filtered_entries:
            return None
        return self.filtered_entries[self.selected]

    def navigate(self, directory: Path) -> "BrowserModel":
        """Show another directory, resetting filter, selection and scroll."""
        # Normalized so Left and ".." always walk up a real level
        directory = Path(os.path.abspath(directory))
        entries = list_entries(directory, self.extensions)
        return replace(
            self,
            current_dir=directory,
            all_entries=entries,
            filtered_entries=entries,
            filter_text="",
            selected=0,
            scroll_offset=0,
        )

    def with_filter(self, filter_text: str) -> "BrowserModel":
        indices = filter_indices([e.name for e in self.all_entries], filter_text)
        filtered = tuple(self.all_entries[i] for i in indices)
        return replace(
            self,
            filter_text=filter_text,
            filtered_entries=filtered,
        ).with_selection(self.selected)

    def with_selection(self, selected: int) -> "BrowserModel":
        selected = clamp_selection(selected, len(self.filtered_entries))
        offset = adjust_scroll(selected, self.scroll_offset, self.max_visible)
        return replace(self, selected=selected, scroll_offset=offset)


def update(model: BrowserModel, event: KeyEvent) -> tuple[BrowserModel, Outcome]:
    if event.kind == KEY_CTRL_C:
        return model, ABORTED

    entry = model.selected_entry

    if event.kind == KEY_ENTER:
        if entry is None:
            return model, CONTINUE
        if entry.is_dir:
            return model.navigate(entry.path), CONTINUE
        return model, submitted(str(entry.path))

    if event.kind == KEY_UP:
        return model.with_selection(model.selected - 1), CONTINUE

    if event.kind == KEY_DOWN:
        return model.with_selection(model.selected + 1), CONTINUE

    if event.kind == KEY_LEFT:
        if is_root_dir(model.current_dir):
            return model, CONTINUE
        return model.navigate(model.current_dir.parent), CONTINUE

    if event.kind == KEY_RIGHT:
        if entry is not None and entry.is_dir:
            return model.navigate(entry.path), CONTINUE
        return model, CONTINUE

    if event.kind == KEY_HOME:
        home = get_home_dir()
        if home is None:
            return model, CONTINUE
        return model.navigate(home), CONTINUE

    if event.kind == KEY_BACKSPACE:
        if model.filter_text:
            return model.with_filter(model.filter_text[:-1]), CONTINUE
        return model, CONTINUE

    if event.kind == KEY_ESC:
        return model.with_filter(""), CONTINUE

    if event.printable:
        return model.with_filter(model.filter_text + event.char), CONTINUE

    return model, CONTINUE


def _header(model: BrowserModel, ctx: RenderContext) -> str:
    prompt = ctx.accent(ctx.bold(model.label))
    if model.extensions:
        prompt += " " + ctx.subtle("(" + ", ".join(model.extensions) + ")")
    return prompt


def _entry_line(entry: Entry, selected: bool, ctx: RenderContext) -> str:
    prefix = ctx.success("> ") if selected else "  "
    icon = "▸ " if entry.is_dir else "  "
    name = entry.name
    if entry.is_dir and entry.name != PARENT_ENTRY_NAME:
        name += "/"
    if selected:
        return prefix + icon + ctx.success(name)
    if entry.is_dir:
        return prefix + icon + ctx.accent(name)
    return prefix + icon + ctx.text(name)


def render(model: BrowserModel, ctx: RenderContext) -> list[str]:
    lines = [
        _header(model, ctx),
        ctx.muted("▸ ") + ctx.text(shorten_home(model.current_dir)),
    ]
    if model.filter_text:
        lines.append(ctx.muted("/ ") + ctx.text(model.filter_text))

    entries = model.filtered_entries
    if not entries:
        lines.append(ctx.muted("  (empty)"))
    else:
        start = model.scroll_offset
        end = min(len(entries), start + model.max_visible)
        if start > 0:
            lines.append(ctx.muted("  ↑ more items above"))
        for i in range(start, end):
            lines.append(_entry_line(entries[i], i == model.selected, ctx))
        if end < len(entries):
            lines.append(ctx.muted("  ↓ more items below"))

    lines.append(ctx.muted(HELP_LINE))
    return lines


def finish(model: BrowserModel, outcome: Outcome, ctx: RenderContext) -> list[str]:
    if outcome.kind != "submit":
        return []
    return [_header(model, ctx), ctx.success("> ") + ctx.text(outcome.value)]


def browse_file(
    label: str,
    extensions=(),
    *,
    start_dir: Path | None = None,
    max_visible: int = DEFAULT_MAX_VISIBLE,
    ctx: RenderContext = DEFAULT_CONTEXT,
    terminal: TerminalIO | None = None,
) -> str:
    """
    Browse the filesystem and pick a file.

    Args:
        label: Prompt label
        extensions: Allowed file extensions such as [".json", ".yaml"]; empty allows all
        start_dir: Directory to start in (default: current working directory)
        max_visible: Number of entries shown before scrolling

    Returns:
        Full path of the chosen file

    Raises:
        UserAborted: If Ctrl+C is pressed
    """
    if start_dir is None:
        try:
            start_dir = Path.cwd()
        except OSError:
            start_dir = Path(".")

    return run_prompt(
        BrowserModel.create(label, start_dir, extensions, max_visible),
        update,
        lambda m: render(m, ctx),
        lambda m, o: finish(m, o, ctx),
        terminal=terminal,
        hide_cursor=True,
        name="file",
    )
