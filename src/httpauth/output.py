"""CLI output: header values on stdout, diagnostics on stderr.

Whatever the CLI prints to stdout is meant to be pasted into a request or
piped into another tool, so only data goes there. Status lines and errors go
to stderr.

The active :class:`OutputManager` is created by
:func:`~httpauth.app.main_callback` and installed with :func:`set_output`;
commands use the module-level helpers (:func:`emit_header`, :func:`error`...)
which delegate to it.

Formats:

* ``plain`` -- one value per line, ``key<TAB>value`` for records.
* ``json`` -- a single JSON document.
* ``rich`` -- syntax-highlighted JSON for records, literal text for values.
* ``auto`` -- ``rich`` on an interactive terminal with colour enabled,
  otherwise ``plain``.

Colour is disabled by ``--no-color``, ``NO_COLOR`` (any value) or
``TERM=dumb``.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax


class OutputFormat(str, Enum):
    """Values accepted by ``--json`` / ``--plain`` and ``output.format``."""

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Holds the resolved output preferences and the two consoles.

    Args:
        format: Requested format; ``AUTO`` is resolved at construction.
        no_color: Disable colour and markup on both streams.
        quiet: Drop ``info`` and ``success`` messages.
        verbose: Show ``debug`` messages.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose
        self._format = _resolve_format(format, self._no_color)

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=self._format is OutputFormat.RICH,
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    # --- stdout ---

    def emit_header(self, name: str, value: str, full_line: bool = False) -> None:
        """Print a header value.

        JSON output is always ``{"header": name, "value": value}``. Otherwise
        the bare value is printed, or ``Name: value`` when *full_line* is set.
        """
        if self._format is OutputFormat.JSON:
            self.format_response({"header": name, "value": value})
        elif full_line:
            self._print_literal(f"{name}: {value}")
        else:
            self._print_literal(value)

    def format_response(self, data: Any) -> None:
        """Print a record (dict), a list, or a scalar in the active format."""
        if self._format is OutputFormat.JSON:
            self.print_data(json.dumps(data, indent=2, ensure_ascii=False, default=str))
            return

        if self._format is OutputFormat.RICH and isinstance(data, (dict, list)):
            rendered = json.dumps(data, indent=2, ensure_ascii=False, default=str)
            self._stdout.print(Syntax(rendered, "json", theme="monokai", word_wrap=True))
            return

        if isinstance(data, dict):
            for key, value in data.items():
                self._print_literal(f"{key}\t{value}")
        elif isinstance(data, list):
            for item in data:
                self._print_literal(str(item))
        else:
            self._print_literal(str(data))

    def print_data(self, text: str) -> None:
        """Write *text* to stdout unchanged."""
        print(text, file=sys.stdout, flush=True)

    # --- stderr ---

    def info(self, message: str) -> None:
        if not self._quiet:
            self._diagnostic(message)

    def success(self, message: str) -> None:
        if not self._quiet:
            self._diagnostic(message, style="green")

    def error(self, message: str) -> None:
        """Report a failure; printed even with ``--quiet``."""
        self._diagnostic(message, style="bold red", label="Error:")

    def debug(self, message: str) -> None:
        if self._verbose:
            self._diagnostic(message, style="dim", label="[debug]")

    # --- helpers ---

    def _print_literal(self, text: str) -> None:
        # Header values may contain brackets; never interpret them as markup.
        if self._format is OutputFormat.RICH:
            self._stdout.print(text, markup=False, highlight=False)
        else:
            self.print_data(text)

    def _diagnostic(
        self, message: str, style: Optional[str] = None, label: Optional[str] = None
    ) -> None:
        if self._no_color:
            text = f"{label} {message}" if label else message
            print(text, file=sys.stderr, flush=True)
            return

        body = escape(message)
        if label:
            body = f"{escape(label)} {body}"
        if style:
            body = f"[{style}]{body}[/{style}]"
        self._stderr.print(body)


def _resolve_format(requested: OutputFormat, no_color: bool) -> OutputFormat:
    if requested is not OutputFormat.AUTO:
        return requested
    if _is_tty() and not no_color:
        return OutputFormat.RICH
    return OutputFormat.PLAIN


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set to anything or ``TERM`` is ``dumb``."""
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# --- installed instance ---

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed manager, creating a default one on first use."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    global _output
    _output = None


def emit_header(name: str, value: str, full_line: bool = False) -> None:
    get_output().emit_header(name, value, full_line=full_line)


def format_response(data: Any) -> None:
    get_output().format_response(data)


def print_data(text: str) -> None:
    get_output().print_data(text)


def info(message: str) -> None:
    get_output().info(message)


def success(message: str) -> None:
    get_output().success(message)


def error(message: str) -> None:
    get_output().error(message)


def debug(message: str) -> None:
    get_output().debug(message)
