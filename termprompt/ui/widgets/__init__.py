"""
Interactive prompt widgets.
"""

from .prompt import Outcome, CONTINUE, ABORTED, submitted, run_prompt
from .confirm import confirm, ConfirmModel
from .line_input import prompt_input, InputModel
from .text_editor import prompt_text, EditorModel
from .select import select, SelectModel
from .file_browser import browse_file, BrowserModel, Entry, list_entries
from .spinner import run_spinner
from .must import (
    must,
    must_confirm,
    must_input,
    must_text,
    must_select,
    must_browse_file,
    must_run,
)

__all__ = [
    # Driver
    "Outcome",
    "CONTINUE",
    "ABORTED",
    "submitted",
    "run_prompt",
    # Widgets
    "confirm",
    "ConfirmModel",
    "prompt_input",
    "InputModel",
    "prompt_text",
    "EditorModel",
    "select",
    "SelectModel",
    "browse_file",
    "BrowserModel",
    "Entry",
    "list_entries",
    "run_spinner",
    # Exit-on-error wrappers
    "must",
    "must_confirm",
    "must_input",
    "must_text",
    "must_select",
    "must_browse_file",
    "must_run",
]
