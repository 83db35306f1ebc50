class GrammarError(Exception):
    pass


class GrammarFileError(GrammarError, OSError):
    """Grammar file is missing or could not be read."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        msg = f"grammar file could not be read: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class EmptyGrammarError(GrammarError, ValueError):
    """Grammar text was read but declares no production block."""


class UndefinedNonterminalError(GrammarError, LookupError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"undefined non-terminal: {symbol}")

    def __str__(self):
        return self.args[0]


class DerivationLimitError(GrammarError, RuntimeError):
    def __init__(self, max_steps):
        self.max_steps = max_steps
        super().__init__(f"derivation did not finish within {max_steps} expansions")
