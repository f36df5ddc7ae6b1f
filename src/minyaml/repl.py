"""YamlRepl — build a document interactively and inspect its values.

Also provides the ``minyaml-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from .builder import ANONYMOUS_LIST_KEY
from .config import ReplSettings, load_settings
from .document import Document, ParseResult, parse
from .errors import KeyNotFoundError
from .values import Value, VInt, VList, VText

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# YamlRepl class (programmatic use)
# ---------------------------------------------------------------------------

class YamlRepl:
    """Accumulates document lines and keeps the parsed Document current.

    Usage::

        repl = YamlRepl()
        repl.eval("name: joe")
        repl.eval("- first")
        repl.doc.value_as("name", str)   # → "joe"
        repl.reset()

    Every call re-parses the whole accumulated source into a fresh
    Document.  A line that does not parse is rejected and leaves the
    previous document in place.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.doc = Document()

    def eval(self, text: str) -> ParseResult:
        candidate = self.lines + [text]
        result = parse("\n".join(candidate))
        if result.ok:
            self.lines = candidate
            self.doc = result.document
        return result

    def reset(self) -> None:
        self.lines = []
        self.doc = Document()


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    if isinstance(value, VText):
        return f'"{value.value}"'
    if isinstance(value, VInt):
        return str(value)
    if isinstance(value, VList):
        return "[" + ", ".join(_fmt_inline(v) for v in value.items) + "]"
    return repr(value)


def _fmt_inspect(value: Value) -> str:
    """Pretty-print a value for inspect() / i()."""
    if isinstance(value, VList):
        if not value.items:
            return "VList []"
        lines = ["VList ["]
        for i, v in enumerate(value.items):
            lines.append(f"  {i}: {_fmt_inline(v)}")
        lines.append("]")
        return "\n".join(lines)
    return f"{type(value).__name__} {_fmt_inline(value)}"


def _show_keys(repl: YamlRepl, dest: IO[str]) -> None:
    """Print every user key (skips the anonymous list key)."""
    entries = {k: v for k, v in repl.doc.values.items() if k != ANONYMOUS_LIST_KEY}
    if not entries:
        print("  (no keys defined)", file=dest)
        return
    width = max(len(k) for k in entries)
    for key, value in entries.items():
        print(f"  {key:<{width}} : {_fmt_inline(value)}", file=dest)


def _show_list(repl: YamlRepl, dest: IO[str]) -> None:
    try:
        lst = repl.doc.list()
    except KeyNotFoundError:
        print("  (no list items)", file=dest)
        return
    print(_fmt_inspect(lst), file=dest)


def _lookup(repl: YamlRepl, key: str, dest: IO[str], inspect: bool = False) -> None:
    value = repl.doc.get(key)
    if value is None:
        print(f"  (no such key: {key})", file=dest)
        return
    print(_fmt_inspect(value) if inspect else str(value), file=dest)


def _feed_file(repl: YamlRepl, filepath: str, dest: IO[str]) -> None:
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                _process_line(repl, file_line.rstrip("\n"), dest)
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _process_line(repl: YamlRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":keys":
        _show_keys(repl, dest)
        return True

    if line == ":list":
        _show_list(repl, dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    # ── inspect() / i() ───────────────────────────────────────────────────
    for prefix in ("inspect(", "i("):
        if line.startswith(prefix) and line.endswith(")"):
            _lookup(repl, line[len(prefix):-1].strip(), dest, inspect=True)
            return True

    # ── ? key ─────────────────────────────────────────────────────────────
    if line.startswith("? "):
        _lookup(repl, line[2:].strip(), dest)
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        _feed_file(repl, line[4:].strip(), dest)
        return True

    # ── Document input ────────────────────────────────────────────────────
    result = repl.eval(line)
    if not result.ok:
        print(f"Syntax error: {result.error}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )


def main(settings: ReplSettings | None = None) -> None:
    """Interactive shell (``minyaml-repl`` / ``python -m minyaml.repl``)."""
    settings = settings or load_settings()
    _configure_logging(settings.log_level)
    repl = YamlRepl()
    dest: IO[str] = sys.stdout
    _file: IO[str] | None = None

    if settings.show_banner:
        print("minyaml REPL  (:q to quit  |  :keys  :list  :reset  |  ? <key>  inspect(<key>))")

    while True:
        try:
            line = input(settings.prompt).strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not line:
            continue

        # ── Output redirect: ?>> filepath  /  ?>> ─────────────────────────
        if line.startswith("?>> "):
            filepath = line[4:].strip()
            if _file:
                _file.close()
            try:
                _file = open(filepath, "w", encoding="utf-8")
                dest = _file
            except OSError as exc:
                print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
            continue

        if line == "?>>":
            if _file:
                _file.close()
                _file = None
            dest = sys.stdout
            continue

        if not _process_line(repl, line, dest):
            break

    if _file:
        _file.close()
    logger.debug("session ended with %d source lines", len(repl.lines))


if __name__ == "__main__":
    main()
