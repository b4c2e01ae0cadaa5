"""
Attribute tokenizer for shortcode markers

Splits the attribute text of an opening marker into positional tokens:

    {{< details "Click to expand" open >}}
                ^^^^^^^^^^^^^^^^^^^^^^  ->  ['Click to expand', 'open']

Tokens are whitespace separated. A token wrapped in single or double
quotes may contain whitespace; the quotes themselves are dropped. Either
quote character toggles quoting, so a token opened with " may be closed
with '.

Example:
    >>> attributes_tokenize('info')
    ['info']
    >>> attributes_tokenize(' "Tab one"   b ')
    ['Tab one', 'b']
"""

from typing import List, Optional

from .exceptions import UnterminatedStringError

QUOTE_CHARACTERS = ('"', "'")


def attributes_tokenize(raw: str) -> List[str]:
    """
    Tokenize raw attribute text into an ordered attribute list

    Args:
        raw: Attribute text between the shortcode name and '>}}'

    Returns:
        Ordered list of tokens (possibly empty). A quoted empty string
        ("") yields an empty token.

    Raises:
        UnterminatedStringError: If a quoted token is never closed
    """
    text = raw.strip()
    tokens: List[str] = []

    quote: Optional[str] = None
    token_start: Optional[int] = None

    for index, char in enumerate(text):
        if quote is not None:
            if char in QUOTE_CHARACTERS:
                tokens.append(text[token_start:index])
                quote = None
                token_start = None
            continue

        if char in QUOTE_CHARACTERS:
            # An unquoted span running straight into a quote ends here
            if token_start is not None:
                tokens.append(text[token_start:index])
            quote = char
            token_start = index + 1
        elif char.isspace():
            if token_start is not None:
                tokens.append(text[token_start:index])
                token_start = None
        elif token_start is None:
            token_start = index

    if quote is not None:
        raise UnterminatedStringError(
            f"Unterminated {quote} string in attributes: {raw.strip()}"
        )

    # Input is trimmed, so a trailing unquoted token has no separator after it
    if token_start is not None:
        tokens.append(text[token_start:])

    return tokens
