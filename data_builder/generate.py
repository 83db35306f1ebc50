import random
from typing import Callable, Iterator, Optional, Sequence, Union
from tqdm import tqdm

from data_builder.cfg import Grammar, ProductionTable
from data_builder.errors import DerivationLimitError, UndefinedNonterminalError
from data_builder.symbols import ParseSymbol

SEPARATOR = " "

# takes n, returns an index in [0, n)
RandomSource = Callable[[int], int]


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    rng = random.Random(seed)
    return rng.randrange


def sequence_source(indices: Sequence[int]) -> RandomSource:
    '''
    Replay a fixed list of choices, one per expansion. Once the list runs out
    the last index is repeated.
    '''
    if not indices:
        raise ValueError("sequence_source needs at least one index")
    it = iter(indices)
    last = indices[-1]

    def _next(n):
        return next(it, last)

    return _next


def generate_sentence(grammar: Union[Grammar, ProductionTable], start_symbol: Optional[ParseSymbol], random_source: RandomSource,
                      max_steps: Optional[int] = None) -> str:
    '''
    Randomized leftmost derivation from start_symbol. Every terminal is
    emitted followed by a single space, so non-empty results end in a space.
    grammar may be a Grammar or a bare production table.
    '''
    productions: ProductionTable = grammar.productions if isinstance(grammar, Grammar) else grammar
    if start_symbol is None:
        return ""

    stack = [start_symbol]
    out = []
    steps = 0
    while stack:
        symbol = stack.pop()
        if symbol.is_terminal():
            out.append(symbol.value + SEPARATOR)
            continue

        bodies = productions.get(symbol)
        if bodies is None:
            raise UndefinedNonterminalError(symbol)
        steps += 1
        if max_steps is not None and steps > max_steps:
            raise DerivationLimitError(max_steps)
        if not bodies:
            continue
        idx = random_source(len(bodies))
        if not 0 <= idx < len(bodies):
            raise ValueError(f"random source returned {idx}, expected an index in [0, {len(bodies)})")
        stack.extend(reversed(bodies[idx]))
    return "".join(out)


def generate_sentences(grammar: Grammar, count: int, random_source: RandomSource,
                       progress: bool = False, max_steps: Optional[int] = None) -> Iterator[str]:
    # raises before the first sentence is requested
    start_symbol = grammar.require_start_symbol()
    steps = range(count)
    if progress:
        steps = tqdm(steps)
    return (generate_sentence(grammar, start_symbol, random_source, max_steps=max_steps) for _ in steps)
