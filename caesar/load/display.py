"""
Terminal Display - Load Layer

Formats the banner and the before/after block. Rendering returns strings so
the layout can be checked without capturing stdout.
"""

from typing import Callable

from caesar.transformation.schemas import CipherResult

OutputFn = Callable[[str], None]

BANNER_LINES = [
    "┌───────────────────────────┐",
    "│ ✨  CAESAR CIPHER ✨      │",
    "└───────────────────────────┘",
]
ARROW = "⇵"
INDENT = "    "


def render_banner() -> str:
    return "\n".join(["", *BANNER_LINES, ""])


def render_result(original: str, processed: str) -> str:
    """Original phrase, arrow, processed phrase, framed by blank lines"""
    return "\n".join(
        [
            "",
            f"{INDENT}{original}",
            f"{INDENT}{ARROW}",
            f"{INDENT}{processed}",
            "",
        ]
    )


def show_banner(output_fn: OutputFn = print):
    output_fn(render_banner())


def show_result(result: CipherResult, output_fn: OutputFn = print):
    output_fn(render_result(result.original, result.processed))
