"""Search result rendering.

Each kind with matches is printed on one line::

          plugins:  chruby  ruby ✓

The kind is right-aligned to 13 columns and followed by ``": "``; every
match is preceded by a space. In monochrome mode enabled components get a
``" ✓ "`` suffix and disabled ones ``"  "``; in color mode the suffixes
are dropped and the enabled state is shown by color instead.

Two renderers are provided: LineRenderer prints the final state in one
go, AnimatedRenderer (interactive terminals only) shows each state
change by rewinding the cursor over the old text.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable

from rich.console import Console
from rich.control import Control
from rich.text import Text

from bitctl.models.search import ActionOutcome, KindResult, SearchOptions

KIND_LABEL_WIDTH = 13
ENABLED_SUFFIX = " ✓ "
DISABLED_SUFFIX = "  "

ENABLED_STYLE = "component.enabled"
DISABLED_STYLE = "component.disabled"
KIND_STYLE = "search.kind"
FLASH_STYLE = "component.flash"

# Frame styles used to flash a component being enabled in monochrome mode
_FLASH_STYLES: tuple[str, ...] = ("dim", FLASH_STYLE, "reverse", FLASH_STYLE, "")


def format_kind_label(result: KindResult, use_color: bool) -> Text:
    """Build the right-aligned ``"      plugins: "`` prefix."""
    label = Text(f"{result.kind.value:>{KIND_LABEL_WIDTH}}:", style=KIND_STYLE if use_color else "")
    label.append(" ")
    return label


def format_component(name: str, enabled: bool, use_color: bool) -> Text:
    """Format one match in the given state, without the leading space."""
    if use_color:
        return Text(name, style=ENABLED_STYLE if enabled else DISABLED_STYLE)
    return Text(f"{name}{ENABLED_SUFFIX if enabled else DISABLED_SUFFIX}")


def build_result_line(result: KindResult, use_color: bool) -> Text:
    """Build the final output line for a kind.

    Args:
        result: Search result with at least one match.
        use_color: Whether to use color instead of text suffixes.

    Returns:
        Rich Text of the complete line (without trailing newline).
    """
    line = format_kind_label(result, use_color)
    for outcome in result.outcomes:
        line.append(" ")
        line.append_text(format_component(outcome.name, outcome.is_enabled_after, use_color))
    return line


class ResultRenderer(ABC):
    """Writes search results to a console."""

    def __init__(self, console: Console) -> None:
        self._console = console

    @abstractmethod
    def render(self, result: KindResult, use_color: bool) -> None:
        """Print one kind's result line. Kinds without matches print nothing."""


class LineRenderer(ResultRenderer):
    """Prints each result line in its final state."""

    def render(self, result: KindResult, use_color: bool) -> None:
        """Print the final-state line for a kind."""
        if not result.has_matches:
            return
        self._console.print(build_result_line(result, use_color), soft_wrap=True)


class AnimatedRenderer(ResultRenderer):
    """Shows each applied change as an in-place transition.

    The old state is printed, erased (or flashed, when enabling in
    monochrome mode) and overwritten with the new state. Once the cursor
    movements are applied the visible text equals the LineRenderer output.
    """

    def __init__(
        self,
        console: Console,
        delay: float = 0.05,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(console)
        self._delay = delay
        self._sleep = sleep

    def render(self, result: KindResult, use_color: bool) -> None:
        """Print a kind's line, animating every applied change."""
        if not result.has_matches:
            return

        self._write(format_kind_label(result, use_color))
        for outcome in result.outcomes:
            self._write(Text(" "))
            self._render_outcome(outcome, use_color)
        self._console.print()

    def _render_outcome(self, outcome: ActionOutcome, use_color: bool) -> None:
        before = format_component(outcome.name, outcome.was_enabled, use_color)
        self._write(before)
        if not outcome.applied:
            return

        width = before.cell_len
        if outcome.is_enabled_after and not use_color:
            self._flash(before.plain, width)
        else:
            self._erase(width)
        self._rewind(width)
        self._write(format_component(outcome.name, outcome.is_enabled_after, use_color))

    def _flash(self, plain: str, width: int) -> None:
        for style in _FLASH_STYLES:
            self._sleep(self._delay * 2)
            self._rewind(width)
            self._write(Text(plain, style=style))

    def _erase(self, width: int) -> None:
        self._rewind(width)
        for _ in range(width):
            self._write(Text(" "))
            self._sleep(self._delay)

    def _rewind(self, width: int) -> None:
        self._console.control(Control.move(x=-width))

    def _write(self, text: Text) -> None:
        self._console.print(text, end="", soft_wrap=True)


def get_renderer(options: SearchOptions, console: Console, delay: float = 0.05) -> ResultRenderer:
    """Pick a renderer for the invocation.

    Animation is used only when requested and the console is an
    interactive terminal.

    Args:
        options: Invocation options.
        console: Console to write to.
        delay: Seconds between animation frames.

    Returns:
        ResultRenderer instance.
    """
    if options.animate and console.is_terminal:
        return AnimatedRenderer(console, delay=delay)
    return LineRenderer(console)
