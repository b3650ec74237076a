import re
from dataclasses import dataclass

from nand_errors import LexicalError

LPAREN = "LParen"
RPAREN = "RParen"
DELIM = "Delim"
FUNC_IDENT = "FuncIdent"
VAR_IDENT = "VarIdent"

# Function identifiers: capital letter followed by at least one letter of any case.
# Variable identifiers: lowercase letter followed by lowercase letters or underscores.
TOKEN_RE = re.compile(
    r"(?P<LParen>\()"
    r"|(?P<RParen>\))"
    r"|(?P<Delim>,)"
    r"|(?P<FuncIdent>[A-Z][A-Za-z]+)"
    r"|(?P<VarIdent>[a-z][a-z_]*)"
)
WHITESPACE_RE = re.compile(r"[ \t\n\r\f]*")


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    position: int = 0

    def __str__(self):
        if self.kind == FUNC_IDENT:
            return f"function '{self.text}'"
        if self.kind == VAR_IDENT:
            return f"variable '{self.text}'"
        return f"'{self.text}'"


def tokenize(text):
    """
    Lazily split text into Tokens.
    Raises LexicalError at the first character that starts no token.
    """
    pos = 0
    index = 0
    length = len(text)
    while True:
        pos = WHITESPACE_RE.match(text, pos).end()
        if pos >= length:
            return
        m = TOKEN_RE.match(text, pos)
        if m is None:
            raise LexicalError(text[pos], index)
        yield Token(m.lastgroup, m.group(), index)
        index += 1
        pos = m.end()
