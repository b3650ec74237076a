"""Errors raised while translating a gate expression.

Positions are indexes into the token stream, not byte offsets.
"""


class TranslateError(ValueError):
    pass


class LexicalError(TranslateError):
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"invalid character {char!r} at position {position}")


class ParseError(TranslateError):
    pass


class UnexpectedToken(ParseError):
    def __init__(self, token, position):
        self.token = token
        self.position = position
        super().__init__(self._message())

    def _message(self):
        return f"unexpected token {self.token} at position {self.position}"


class UnexpectedEnd(UnexpectedToken):
    """The input ended while a token was still required."""

    def __init__(self, position):
        super().__init__(None, position)

    def _message(self):
        return f"unexpected end of input at position {self.position}"


class InvalidFunctionId(ParseError):
    """Unknown gate, or a known gate with the wrong argument count.

    `position` is None when the node was built directly rather than parsed.
    """

    def __init__(self, name, arity, position=None):
        self.name = name
        self.arity = arity
        self.position = position
        message = f"invalid function identity '{name}' with {arity} argument(s)"
        if position is not None:
            message += f" at position {position}"
        super().__init__(message)


class NestingTooDeep(ParseError):
    def __init__(self, limit, position):
        self.limit = limit
        self.position = position
        super().__init__(
            f"function calls nested deeper than {limit} at position {position}"
        )
