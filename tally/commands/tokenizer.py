def tokenize(text: str) -> list[str]:
    """Split ``text`` on spaces, keeping double-quoted runs together.

    Quotes are dropped from the output and there is no escaping. An
    unterminated quote runs to the end of the input.

    >>> tokenize('"reserva de emergencia" CDB 1000')
    ['reserva de emergencia', 'CDB', '1000']
    """
    tokens: list[str] = []
    current = ""
    in_quotes = False

    for char in text:
        if char == '"':
            in_quotes = not in_quotes
        elif char == " " and not in_quotes:
            if current:
                tokens.append(current)
                current = ""
        else:
            current += char

    if current:
        tokens.append(current)
    return tokens


def quote(token: str) -> str:
    """Inverse of tokenize for a single token."""
    return f'"{token}"' if " " in token else token


def join_tokens(tokens: list[str]) -> str:
    return " ".join(quote(token) for token in tokens)
