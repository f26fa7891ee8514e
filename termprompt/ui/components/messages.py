"""
Status message helpers.

info goes to stdout; warn, error and debug go to stderr so they don't mix
with a program's real output.
"""

import sys

from ..primitives.theme import RenderContext, DEFAULT_CONTEXT


def _join(args) -> str:
    return " ".join(str(a) for a in args)


def info(*args):
    print(_join(args), file=sys.stdout, flush=True)


def warn(*args, ctx: RenderContext = DEFAULT_CONTEXT):
    print(ctx.warning(_join(args)), file=sys.stderr, flush=True)


def error(*args, ctx: RenderContext = DEFAULT_CONTEXT):
    print(ctx.error(_join(args)), file=sys.stderr, flush=True)


def debug(*args, ctx: RenderContext = DEFAULT_CONTEXT):
    print(ctx.muted(_join(args)), file=sys.stderr, flush=True)


def fatal(*args, ctx: RenderContext = DEFAULT_CONTEXT, code: int = 1):
    """Print an error and exit the process."""
    error(*args, ctx=ctx)
    sys.exit(code)


def title(text: str, ctx: RenderContext = DEFAULT_CONTEXT):
    """Print a bold, underlined heading."""
    print(ctx.bold(ctx.underline(ctx.highlight(text))), flush=True)
