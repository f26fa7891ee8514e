#!/usr/bin/env python3
"""
termprompt demo - walks through every prompt widget.

Usage:
    python demo.py            # dark theme
    python demo.py --light    # light theme
"""

import argparse
import sys
import time
from datetime import datetime

from termprompt import (
    UISettings,
    UserAborted,
    is_terminal,
    fatal,
    title,
    warn,
    info,
    print_table,
    must_input,
    must_select,
    must_confirm,
    must_text,
    must_run,
    browse_file,
)
from termprompt import __version__
from termprompt.core.logging import TeeOutput, debug_log
from termprompt.core.paths import get_logs_dir, get_settings_path

COLORS = [
    "Red",
    "Orange",
    "Yellow",
    "Green",
    "Cyan",
    "Blue",
    "Purple",
    "Pink",
    "Magenta",
    "White",
    "Black",
    "Gray",
]

CONFIG_EXTENSIONS = [".json", ".yaml", ".toml", ".yml"]


def run_demo(settings: UISettings):
    ctx = settings.render_context()

    title("termprompt demo", ctx=ctx)
    print()

    name = must_input("What is your name?", "anonymous", ctx=ctx)

    _, color = must_select("Pick your favorite color (type to filter):", COLORS, ctx=ctx)

    if not must_confirm("Do you want to continue?", True, ctx=ctx):
        warn("Cancelled by user", ctx=ctx)
        return

    description = must_text("Enter a description:", ctx=ctx)

    try:
        config_file = browse_file(
            "Select a config file:",
            CONFIG_EXTENSIONS,
            max_visible=settings.browser_max_visible,
            ctx=ctx,
        )
    except UserAborted:
        warn("File selection skipped", ctx=ctx)
        config_file = "(none)"

    print()
    must_run("Processing your data...", lambda: time.sleep(2),
             interval_ms=settings.spinner_interval_ms, ctx=ctx)
    print()

    print_table(
        ["Field", "Value"],
        [
            ["Name", name],
            ["Color", color],
            ["Description", description],
            ["Config", config_file],
        ],
        ctx=ctx,
    )
    info("Done.")


def main():
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="termprompt demo - interactive terminal prompts"
    )
    parser.add_argument("-l", "--light", action="store_true", help="use the light theme")
    args = parser.parse_args()

    if not is_terminal():
        fatal("termprompt demo needs an interactive terminal")

    log_path = get_logs_dir() / f"{datetime.now().strftime('%Y-%m-%d')}.log"
    tee = TeeOutput(log_path, version=__version__)
    sys.stdout = tee

    settings_path = get_settings_path()
    settings = UISettings.load(settings_path)
    if not settings_path.exists():
        settings.save()
    if args.light:
        # Flag only applies to this run; not saved
        settings.theme = "latte"
    debug_log(f"SETTINGS | theme={settings.theme} | color_mode={settings.color_mode}")

    try:
        run_demo(settings)
    finally:
        sys.stdout = tee.terminal
        tee.close()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(0)
