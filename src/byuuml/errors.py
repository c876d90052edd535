# src/byuuml/errors.py

"""Parse errors.

Every failure aborts document construction; there is no partial result.
Each error keeps the offending logical line (indentation included) so
callers can point at it in a diagnostic.
"""


class ParseError(ValueError):
    """Base class for all byuuML parse failures."""

    kind = "parse_error"
    default_message = "Parse error"

    def __init__(
        self, message: str | None = None, *, line: bytes | None = None
    ) -> None:
        self.message = message or self.default_message
        self.line = line
        if line is None:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {line!r}")


class InvalidNodeNameError(ParseError):
    kind = "invalid_node_name"
    default_message = "Invalid node name"


class UnterminatedQuoteError(ParseError):
    kind = "unterminated_quote"
    default_message = "Unterminated quoted data"


class BlankIndentedLineError(ParseError):
    kind = "blank_indented_line"
    default_message = "Blank indented line"


class NoParentError(ParseError):
    kind = "no_parent"
    default_message = "Indented node has no parent"


class InvalidIndentationError(ParseError):
    kind = "invalid_indentation"
    default_message = "Invalid indentation level"


class TooDeepError(ParseError):
    kind = "too_deep"
    default_message = "Document too deep"


class EmptyDocumentError(ParseError):
    kind = "empty_document"
    default_message = "Empty document"


class DataDecodeError(ParseError):
    """Node data is not valid in the configured encoding.

    ``line`` holds the raw, undecoded data of the offending node.
    """

    kind = "decode_error"
    default_message = "Cannot decode node data"
