from enum import Enum
from typing import Dict, List, Optional
from nltk import CFG, Nonterminal
from nltk.grammar import Production

from data_builder.errors import EmptyGrammarError
from data_builder.symbols import ParseSymbol, symbol_from_token, symbol_to_token
from utils.grammar_utils import get_grammar_text

BLOCK_START = "{"
BLOCK_END = "}"
BODY_END = ";"

ProductionTable = Dict[ParseSymbol, List[List[ParseSymbol]]]


class ParserState(Enum):
    OUTSIDE_BLOCK = "outside_block"
    EXPECT_HEAD = "expect_head"
    ACCUMULATING_BODY = "accumulating_body"


class Grammar:
    def __init__(self, productions: Optional[ProductionTable] = None, start_symbol: Optional[ParseSymbol] = None):
        self.productions: ProductionTable = productions if productions is not None else {}
        self.start_symbol = start_symbol

    def __len__(self):
        return len(self.productions)

    def __contains__(self, symbol):
        return symbol in self.productions

    def bodies(self, symbol: ParseSymbol) -> List[List[ParseSymbol]]:
        return self.productions[symbol]

    def require_start_symbol(self) -> ParseSymbol:
        if self.start_symbol is None:
            raise EmptyGrammarError("grammar declares no production block")
        return self.start_symbol

    def to_source(self) -> str:
        '''
        Write the table back out in bracket notation, one block per head.
        The start symbol's block goes first so it stays the start symbol.
        '''
        heads = list(self.productions)
        if self.start_symbol in self.productions:
            heads.remove(self.start_symbol)
            heads.insert(0, self.start_symbol)
        blocks = []
        for head in heads:
            tokens = [BLOCK_START, head.value]
            for body in self.productions[head]:
                tokens.extend(symbol_to_token(sym) for sym in body)
                tokens.append(BODY_END)
            tokens.append(BLOCK_END)
            blocks.append(" ".join(tokens))
        # blocks are joined by a space, a bare newline would glue onto "}"
        return " ".join(blocks)

    def to_nltk(self) -> CFG:
        start = self.require_start_symbol()
        productions = []
        for head, bodies in self.productions.items():
            for body in bodies:
                rhs = [_to_nltk_symbol(sym) for sym in body]
                productions.append(Production(_to_nltk_nonterminal(head), rhs))
        return CFG(_to_nltk_nonterminal(start), productions)

    def __repr__(self):
        return f"Grammar(start_symbol={self.start_symbol!r}, heads={len(self.productions)})"


def _to_nltk_nonterminal(symbol: ParseSymbol) -> Nonterminal:
    # heads are non-terminals in nltk even when written without brackets
    if symbol.is_nonterminal():
        return Nonterminal(symbol.value[1:-1])
    return Nonterminal(symbol.value)


def _to_nltk_symbol(symbol: ParseSymbol):
    if symbol.is_nonterminal():
        return _to_nltk_nonterminal(symbol)
    return symbol.value


def tokenize(text: str) -> List[str]:
    # \r\n becomes a space, lone \n is left inside tokens on purpose
    return text.replace("\r\n", " ").split(" ")


class GrammarParser:
    '''
    Token-at-a-time state machine for the bracket notation:

        { <head> body tokens ; more body tokens ; }

    Tokens outside a block are ignored. The first head seen is the start symbol.
    '''

    def __init__(self):
        self.state = ParserState.OUTSIDE_BLOCK
        self.productions: ProductionTable = {}
        self.start_symbol: Optional[ParseSymbol] = None
        self._head: Optional[ParseSymbol] = None
        self._body: List[ParseSymbol] = []

    def step(self, state: ParserState, token: str) -> ParserState:
        if state is ParserState.OUTSIDE_BLOCK:
            if token == BLOCK_START:
                return ParserState.EXPECT_HEAD
            return ParserState.OUTSIDE_BLOCK

        if token == BLOCK_END:
            # an unterminated body at block end is dropped
            self._head = None
            self._body = []
            return ParserState.OUTSIDE_BLOCK

        if state is ParserState.EXPECT_HEAD:
            self._head = ParseSymbol(token)
            self.productions[self._head] = []
            if self.start_symbol is None:
                self.start_symbol = self._head
            return ParserState.ACCUMULATING_BODY

        if token == BODY_END:
            self.productions[self._head].append(self._body)
            self._body = []
        else:
            self._body.append(symbol_from_token(token))
        return ParserState.ACCUMULATING_BODY

    def feed(self, tokens):
        for token in tokens:
            self.state = self.step(self.state, token)
        return self

    def grammar(self) -> Grammar:
        return Grammar(self.productions, self.start_symbol)


def parse_grammar(text: str) -> Grammar:
    return GrammarParser().feed(tokenize(text)).grammar()


def load_grammar(path: str, encoding: str = "utf-8") -> Grammar:
    '''
    Read a grammar file and parse it. Raises GrammarFileError when the file
    is missing or unreadable; an empty or malformed file gives a Grammar
    whose start_symbol is None.
    '''
    return parse_grammar(get_grammar_text(path, encoding=encoding))
