"""
Exception classes for shortcode processing

Every failure raised while transforming a document derives from
ShortcodeError, so a host can catch a single type and still report which
shortcode, line and document failed.
"""

from typing import List, Optional


class ShortcodeError(Exception):
    """
    Base class for all shortcode processing failures

    Attributes:
        message: Human-readable description of the failure
        shortcode: Name of the shortcode kind being processed (if known)
        line_number: 1-based line of the offending occurrence (if known)
        document: Name of the document being processed (set by the host)
    """

    def __init__(
        self,
        message: str,
        shortcode: Optional[str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.shortcode = shortcode
        self.line_number = line_number
        self.document: Optional[str] = None

    def context_attach(
        self,
        shortcode: Optional[str] = None,
        line_number: Optional[int] = None,
        document: Optional[str] = None,
    ) -> "ShortcodeError":
        """
        Fill in location context that was unknown where the error was raised.

        Context already present is never overwritten: the innermost raiser
        knows best (e.g. a 'tab' inside 'tabs').
        """
        if self.shortcode is None:
            self.shortcode = shortcode
        if self.line_number is None:
            self.line_number = line_number
        if self.document is None:
            self.document = document
        return self

    def __str__(self) -> str:
        location = []
        if self.document is not None:
            location.append(f"document '{self.document}'")
        if self.shortcode is not None:
            location.append(f"shortcode '{self.shortcode}'")
        if self.line_number is not None:
            location.append(f"line {self.line_number}")
        if not location:
            return self.message
        return f"{self.message} ({', '.join(location)})"


class NoClosingDirectiveError(ShortcodeError):
    """Opening marker without its '>}}' or without a matching close marker"""
    pass


class UnterminatedStringError(ShortcodeError):
    """Quoted attribute token opened but never closed"""
    pass


class InvalidAttributeCountError(ShortcodeError):
    """Renderer received a number of attributes outside its accepted arity"""

    def __init__(self, shortcode: str, expected: str, actual: int) -> None:
        super().__init__(
            f"Expected {expected} attribute(s), got {actual}",
            shortcode=shortcode,
        )
        self.expected = expected
        self.actual = actual


class UnknownAttributeValueError(ShortcodeError):
    """Attribute is syntactically valid but not one of the accepted values"""

    def __init__(self, shortcode: str, value: str, accepted: List[str]) -> None:
        super().__init__(
            f"Unknown value '{value}' (accepted: {', '.join(accepted)})",
            shortcode=shortcode,
        )
        self.value = value
        self.accepted = accepted


class UnknownHintKindError(UnknownAttributeValueError):
    pass
