"""
Filterable single-selection list.

Typing narrows the list to items containing the typed text
(case-insensitive); arrow keys move within what's left.
"""

from dataclasses import dataclass, replace

from ...core.errors import EmptyInput
from ..primitives.keyboard_input import (
    KeyEvent,
    KEY_CTRL_C,
    KEY_ENTER,
    KEY_UP,
    KEY_DOWN,
    KEY_BACKSPACE,
    KEY_ESC,
)
from ..primitives.terminal import TerminalIO
from ..primitives.theme import RenderContext, DEFAULT_CONTEXT
from .prompt import Outcome, CONTINUE, ABORTED, submitted, run_prompt


def filter_indices(names, filter_text: str) -> tuple[int, ...]:
    """Indices of names containing filter_text (case-insensitive), in order."""
    if not filter_text:
        return tuple(range(len(names)))
    needle = filter_text.lower()
    return tuple(i for i, name in enumerate(names) if needle in name.lower())


def clamp_selection(selected: int, count: int) -> int:
    """Keep a selection index inside [0, count - 1], or 0 for an empty view."""
    if count == 0:
        return 0
    return max(0, min(selected, count - 1))


@dataclass(frozen=True)
class SelectModel:
    label: str
    items: tuple[str, ...]
    filter_text: str = ""
    filtered_indices: tuple[int, ...] = ()
    selected: int = 0

    @classmethod
    def create(cls, label: str, items) -> "SelectModel":
        items = tuple(items)
        return cls(label, items, filtered_indices=filter_indices(items, ""))

    @property
    def filtered_items(self) -> list[str]:
        return [self.items[i] for i in self.filtered_indices]

    def with_filter(self, filter_text: str) -> "SelectModel":
        indices = filter_indices(self.items, filter_text)
        return replace(
            self,
            filter_text=filter_text,
            filtered_indices=indices,
            selected=clamp_selection(self.selected, len(indices)),
        )


def update(model: SelectModel, event: KeyEvent) -> tuple[SelectModel, Outcome]:
    if event.kind == KEY_CTRL_C:
        return model, ABORTED

    if event.kind == KEY_ENTER:
        if not model.filtered_indices:
            return model, CONTINUE
        index = model.filtered_indices[model.selected]
        return model, submitted((index, model.items[index]))

    if event.kind == KEY_UP:
        return replace(model, selected=max(0, model.selected - 1)), CONTINUE

    if event.kind == KEY_DOWN:
        last = max(0, len(model.filtered_indices) - 1)
        return replace(model, selected=min(last, model.selected + 1)), CONTINUE

    if event.kind == KEY_BACKSPACE:
        if model.filter_text:
            return model.with_filter(model.filter_text[:-1]), CONTINUE
        return model, CONTINUE

    if event.kind == KEY_ESC:
        return replace(model, selected=0).with_filter(""), CONTINUE

    if event.printable:
        return model.with_filter(model.filter_text + event.char), CONTINUE

    return model, CONTINUE


def render(model: SelectModel, ctx: RenderContext) -> list[str]:
    lines = []
    if model.label:
        lines.append(ctx.accent(ctx.bold(model.label)))
    if model.filter_text:
        lines.append(ctx.muted("Filter: ") + ctx.text(model.filter_text))
    for i, item in enumerate(model.filtered_items):
        if i == model.selected:
            lines.append(ctx.success("> ") + ctx.success(item))
        else:
            lines.append(ctx.subtle("  ") + ctx.text(item))
    return lines


def finish(model: SelectModel, outcome: Outcome, ctx: RenderContext) -> list[str]:
    if outcome.kind != "submit":
        return []
    _, text = outcome.value
    lines = []
    if model.label:
        lines.append(ctx.accent(ctx.bold(model.label)))
    lines.append(ctx.success("> ") + ctx.text(text))
    return lines


def select(
    label: str,
    items,
    *,
    ctx: RenderContext = DEFAULT_CONTEXT,
    terminal: TerminalIO | None = None,
) -> tuple[int, str]:
    """
    Pick one item from a list.

    Returns:
        (index into items, item text)

    Raises:
        EmptyInput: If items is empty (checked before touching the terminal)
        UserAborted: If Ctrl+C is pressed
    """
    if not items:
        raise EmptyInput()

    return run_prompt(
        SelectModel.create(label, items),
        update,
        lambda m: render(m, ctx),
        lambda m, o: finish(m, o, ctx),
        terminal=terminal,
        hide_cursor=True,
        name="select",
    )
