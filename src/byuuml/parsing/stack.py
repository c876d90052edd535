# src/byuuml/parsing/stack.py

"""Indentation-driven tree assembly.

Each logical line is classified against the most recently opened node:

- deeper: a new child, or a data continuation if it starts with ``:``
- same depth: a sibling; the previous node is closed first
- shallower: closes nodes until one at exactly that depth, which is then
  closed as well and replaced by the new sibling

Closed nodes are attached to the node below them on the stack, or to the
root list when nothing is below.
"""

import logging

from byuuml.errors import (
    BlankIndentedLineError,
    EmptyDocumentError,
    InvalidIndentationError,
    NoParentError,
    TooDeepError,
)

from .header import ParseNode, parse_header

logger = logging.getLogger(__name__)

INDENT_CHARS = b" \t"
CONTINUATION_MARKER = b":"


def measure_indentation(line: bytes) -> int:
    """Count leading spaces and tabs, one column each."""
    return len(line) - len(line.lstrip(INDENT_CHARS))


class IndentationStack:
    def __init__(self, max_depth: int = 50) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        self.max_depth = max_depth
        self.deepest = 0
        self._open: list[ParseNode] = []
        self._roots: list[ParseNode] = []

    @property
    def depth(self) -> int:
        return len(self._open)

    def feed(self, line: bytes) -> None:
        """Apply one logical line (indentation included) to the tree."""
        level = measure_indentation(line)
        if level == len(line):
            raise BlankIndentedLineError(line=line)

        if not self._open:
            if level != 0:
                raise NoParentError(line=line)
            self._push(line, level)
        else:
            recent = self._open[-1]
            if level < recent.indentation_level:
                self._close_to_ancestor(line, level)
            elif level > recent.indentation_level:
                if line.startswith(CONTINUATION_MARKER, level):
                    logger.debug("Data continuation for node %r", recent.name)
                    recent.append_data(line[level + 1 :])
                else:
                    self._push(line, level)
            else:
                self._replace_top(line, level)

        self.deepest = max(self.deepest, len(self._open))
        if len(self._open) > self.max_depth:
            raise TooDeepError(line=line)

    def finish(self) -> list[ParseNode]:
        """Close every open node and return the finished root nodes."""
        if not self._open:
            raise EmptyDocumentError()
        while self._open:
            self._close_top()
        return self._roots

    def _push(self, line: bytes, level: int) -> None:
        node, _ = parse_header(line, level)
        node.indentation_level = level
        self._open.append(node)

    def _close_top(self) -> None:
        node = self._open.pop()
        node.close()
        if self._open:
            self._open[-1].children.append(node)
        else:
            self._roots.append(node)

    def _close_to_ancestor(self, line: bytes, level: int) -> None:
        while self._open[-1].indentation_level > level:
            self._close_top()
        if self._open[-1].indentation_level != level:
            raise InvalidIndentationError(line=line)
        self._replace_top(line, level)

    def _replace_top(self, line: bytes, level: int) -> None:
        self._close_top()
        self._push(line, level)
