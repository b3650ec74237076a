"""
Recursive-descent parser for gate expressions.

    Start   ::= Func end-of-input
    Func    ::= FuncIdent '(' ArgList ')'
    ArgList ::= Arg (',' Arg)*
    Arg     ::= VarIdent | Func

One token of lookahead, no backtracking. Gate identity and arity are checked
as each Func is reduced. Nested calls are tracked on an explicit stack of
open frames instead of the Python call stack, so any nesting depth parses.
"""
from nand_errors import InvalidFunctionId, NestingTooDeep, UnexpectedEnd, UnexpectedToken
from nand_lexer import DELIM, FUNC_IDENT, LPAREN, RPAREN, VAR_IDENT, tokenize
from nand_tree import Func, GateId, Var


class Frame:
    """A Func whose ')' has not been reached yet."""

    def __init__(self, ident, position):
        self.ident = ident
        self.position = position
        self.args = []


class Parser:
    def __init__(self, tokens, max_depth=None):
        self.tokens = iter(tokens)
        self.max_depth = max_depth
        self.position = 0
        self._lookahead = None
        self._peeked = False

    def peek(self):
        if not self._peeked:
            self._lookahead = next(self.tokens, None)
            self._peeked = True
        return self._lookahead

    def consume(self):
        """Return the lookahead token and advance, or fail if input ended."""
        token = self.peek()
        if token is None:
            raise UnexpectedEnd(self.position)
        self._peeked = False
        self.position += 1
        return token

    def expect(self, kind):
        token = self.peek()
        if token is None:
            raise UnexpectedEnd(self.position)
        if token.kind != kind:
            raise UnexpectedToken(token, self.position)
        return self.consume()

    # Start ::= Func end-of-input
    def start(self):
        tree = self.func()
        token = self.peek()
        if token is not None:
            raise UnexpectedToken(token, self.position)
        return tree

    # FuncIdent '(' : opens a frame one level below the current one.
    def open_func(self, depth):
        ident = self.expect(FUNC_IDENT)
        frame = Frame(ident, self.position - 1)
        if self.max_depth is not None and depth > self.max_depth:
            raise NestingTooDeep(self.max_depth, frame.position)
        self.expect(LPAREN)
        return frame

    def reduce(self, frame):
        gate = GateId.lookup(frame.ident.text, len(frame.args))
        if gate is None:
            raise InvalidFunctionId(frame.ident.text, len(frame.args), frame.position)
        return Func(gate, frame.args)

    # Func    ::= FuncIdent '(' ArgList ')'
    # ArgList ::= Arg (',' Arg)*
    # Arg     ::= VarIdent | Func
    def func(self):
        frames = [self.open_func(1)]
        while True:
            token = self.peek()
            if token is None:
                raise UnexpectedEnd(self.position)
            if token.kind == FUNC_IDENT:
                frames.append(self.open_func(len(frames) + 1))
                continue
            if token.kind != VAR_IDENT:
                raise UnexpectedToken(token, self.position)
            node = Var(self.consume().text)

            # Attach the finished argument, closing every frame that ends here.
            while True:
                frames[-1].args.append(node)
                token = self.peek()
                if token is not None and token.kind == DELIM:
                    self.consume()
                    break
                self.expect(RPAREN)
                node = self.reduce(frames.pop())
                if not frames:
                    return node


def parse(source, max_depth=None):
    """Parse text, or an iterable of Tokens, into a tree.

    `max_depth`, when given, caps how deeply function calls may nest.
    """
    tokens = tokenize(source) if isinstance(source, str) else source
    return Parser(tokens, max_depth=max_depth).start()
