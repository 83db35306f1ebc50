NONTERMINAL_PREFIX = "<"
NONTERMINAL_SUFFIX = ">"
NEWLINE_TOKEN = "\\n"  # written as backslash-n in grammar files


class ParseSymbol:
    '''
    A single grammar token. Non-terminals are written as <name>, anything
    else is a terminal that ends up verbatim in generated sentences.
    Two symbols are equal iff their text is equal.
    '''
    __slots__ = ("_value",)

    def __init__(self, value: str):
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("ParseSymbol is immutable")

    @property
    def value(self) -> str:
        return self._value

    def is_nonterminal(self) -> bool:
        return (self._value.startswith(NONTERMINAL_PREFIX)
                and self._value.endswith(NONTERMINAL_SUFFIX))

    def is_terminal(self) -> bool:
        return not self.is_nonterminal()

    def __eq__(self, other):
        if not isinstance(other, ParseSymbol):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"ParseSymbol({self._value!r})"


NEWLINE = ParseSymbol("\n")


def symbol_from_token(token: str) -> ParseSymbol:
    if token == NEWLINE_TOKEN:
        return NEWLINE
    return ParseSymbol(token)


def symbol_to_token(symbol: ParseSymbol) -> str:
    if symbol == NEWLINE:
        return NEWLINE_TOKEN
    return symbol.value
