# src/byuuml/parsing/header.py

"""Single-line grammar.

A header line (indentation already stripped) looks like::

    name
    name:verbatim data to end of line
    name=value attr1 attr2=x
    name="quoted value" attr="y" // trailing comment

Names are runs of ``[A-Za-z0-9.-]``. Attributes are leaf child nodes parsed
with the same grammar, minus attributes of their own and trailing comments.
"""

from dataclasses import dataclass, field

from byuuml.errors import InvalidNodeNameError, UnterminatedQuoteError

NAME_CHARS = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789.-"
)

SPACE = ord(" ")
EQUALS = ord("=")
COLON = ord(":")
QUOTE = ord('"')
COMMENT_MARKER = b"//"

# An open node with data carries one of these at the end of ``data`` so that
# continuation lines join with line breaks. Removed by ``close()``.
LINE_BREAK = b"\n"


@dataclass
class ParseNode:
    """Mutable node used only while a document is being assembled."""

    name: bytes = b""
    data: bytes = b""
    indentation_level: int = 0
    children: list["ParseNode"] = field(default_factory=list)

    def append_data(self, text: bytes) -> None:
        self.data += text + LINE_BREAK

    def close(self) -> None:
        if self.data:
            self.data = self.data[:-1]


def is_name_char(byte: int) -> bool:
    return byte in NAME_CHARS


def parse_header(
    line: bytes,
    start: int = 0,
    *,
    is_attribute: bool = False,
) -> tuple[ParseNode, int]:
    """Parse one node header starting at ``line[start]``.

    Args:
        line: The whole logical line, used as error context as well.
        start: Offset of the first name character.
        is_attribute: Parse an inline attribute: stop after its own data,
            never collect further attributes, never append a line break.

    Returns:
        The parsed node and the offset where parsing stopped. For
        non-attribute nodes this is always ``len(line)``.

    Raises:
        InvalidNodeNameError: ``line[start]`` is not a name character.
        UnterminatedQuoteError: A ``="`` value has no closing quote.
    """
    end = len(line)
    if start >= end or not is_name_char(line[start]):
        raise InvalidNodeNameError(line=line)

    p = start + 1
    while p < end and is_name_char(line[p]):
        p += 1
    node = ParseNode(name=line[start:p])

    suffix = b"" if is_attribute else LINE_BREAK
    if p == end:
        pass
    elif line[p] == EQUALS:
        p += 1
        if p < end and line[p] == QUOTE:
            p += 1
            closing = line.find(b'"', p)
            if closing == -1:
                raise UnterminatedQuoteError(line=line)
            node.data = line[p:closing] + suffix
            p = closing + 1
        else:
            space = line.find(b" ", p)
            if space == -1:
                space = end
            node.data = line[p:space] + suffix
            p = space
    elif line[p] == COLON:
        node.data = line[p + 1 :] + suffix
        p = end
    elif line[p] == SPACE:
        p += 1

    if not is_attribute:
        p = _parse_attributes(node, line, p)
    return node, p


def _parse_attributes(node: ParseNode, line: bytes, p: int) -> int:
    end = len(line)
    while p < end:
        while p < end and line[p] == SPACE:
            p += 1
        if p == end or line.startswith(COMMENT_MARKER, p):
            break
        attribute, p = parse_header(line, p, is_attribute=True)
        node.children.append(attribute)
    return end
