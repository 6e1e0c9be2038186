"""
Code writer — incremental text builder for generated C# source.

Tracks a nesting depth and prefixes every full line with one tab per
level.  Brace blocks are opened with ``open_block()`` and released
through the returned handle, normally as a context manager:

    writer = CodeWriter()
    writer.append_line("public Foo()")
    with writer.open_block():
        writer.append_line("Value = value;")

Releasing a block always writes the closing brace followed by a blank
line, even when the body raises.
"""

from __future__ import annotations

from types import TracebackType

INDENT = "\t"
NEWLINE = "\n"


class CodeBlock:
    """Handle for one open ``{ ... }`` block on a :class:`CodeWriter`.

    ``close()`` runs at most once; later calls are no-ops.
    """

    def __init__(self, writer: CodeWriter) -> None:
        self._writer = writer
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._writer._close_block()

    def __enter__(self) -> CodeBlock:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class CodeWriter:
    """Accumulates generated text with tab indentation and brace blocks."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._depth = 0

    @property
    def depth(self) -> int:
        """Current nesting depth (number of open blocks)."""
        return self._depth

    def append(self, text: str) -> CodeWriter:
        """Append ``text`` at the write position, without indentation."""
        self._parts.append(text)
        return self

    def append_line(self, line: str) -> CodeWriter:
        """Write an indented line terminated by a newline."""
        self._parts.append(INDENT * self._depth)
        self._parts.append(line)
        self._parts.append(NEWLINE)
        return self

    def append_blank_line(self) -> CodeWriter:
        """Write a bare newline (no indentation)."""
        self._parts.append(NEWLINE)
        return self

    def open_block(self) -> CodeBlock:
        """Write ``{`` at the current depth and indent one level deeper."""
        self.append_line("{")
        self._depth += 1
        return CodeBlock(self)

    def _close_block(self) -> None:
        self._depth -= 1
        self.append_line("}")
        self.append_blank_line()

    def serialize(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.serialize()
