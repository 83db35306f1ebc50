import re
import pytest

from data_builder.cfg import parse_grammar
from data_builder.errors import DerivationLimitError, EmptyGrammarError, UndefinedNonterminalError
from data_builder.generate import generate_sentence, generate_sentences, make_random_source, sequence_source
from data_builder.symbols import ParseSymbol

RECURSIVE = "{ <S> a ; b <S> ; }"


def always(index):
    return lambda n: index


def test_always_first_body():
    grammar = parse_grammar(RECURSIVE)
    assert generate_sentence(grammar, grammar.start_symbol, always(0)) == "a "


def test_scripted_choices():
    grammar = parse_grammar(RECURSIVE)
    assert generate_sentence(grammar, grammar.start_symbol, sequence_source([1, 1, 0])) == "b b a "


def test_newline_terminal():
    grammar = parse_grammar("{ <S> \\n ; }")
    assert generate_sentence(grammar, grammar.start_symbol, always(0)) == "\n "


def test_no_start_symbol_gives_empty_string():
    grammar = parse_grammar("")
    assert grammar.start_symbol is None
    assert generate_sentence(grammar, grammar.start_symbol, always(0)) == ""


def test_start_symbol_without_bodies_gives_empty_string():
    grammar = parse_grammar("{ <S> }")
    assert generate_sentence(grammar, grammar.start_symbol, always(0)) == ""


def test_undefined_nonterminal():
    grammar = parse_grammar("{ <S> a <X> ; }")
    with pytest.raises(UndefinedNonterminalError) as excinfo:
        generate_sentence(grammar, grammar.start_symbol, always(0))
    assert excinfo.value.symbol == ParseSymbol("<X>")
    assert str(excinfo.value) == "undefined non-terminal: <X>"


def test_leftmost_order_is_preserved():
    grammar = parse_grammar("{ <S> <A> <B> c ; } { <A> a1 a2 ; } { <B> b ; }")
    assert generate_sentence(grammar, grammar.start_symbol, always(0)) == "a1 a2 b c "


def test_accepts_bare_production_table():
    grammar = parse_grammar(RECURSIVE)
    assert generate_sentence(grammar.productions, ParseSymbol("<S>"), always(0)) == "a "


def test_output_contains_only_terminals():
    text = ("{ <S> <NP> <VP> ; <NP> <VP> and <S> ; } { <NP> the <N> ; <N> ; } "
            "{ <N> dog ; cat ; } { <VP> runs ; sees <NP> ; }")
    grammar = parse_grammar(text)
    source = make_random_source(7)
    for _ in range(50):
        sentence = generate_sentence(grammar, grammar.start_symbol, source, max_steps=10000)
        assert sentence.endswith(" ")
        assert not re.search(r"<[^ ]*>", sentence)
        assert set(sentence.split()) <= {"the", "dog", "cat", "runs", "sees", "and"}


def test_recursion_with_escape_terminates():
    grammar = parse_grammar(RECURSIVE)
    source = make_random_source(0)
    for _ in range(100):
        sentence = generate_sentence(grammar, grammar.start_symbol, source)
        assert re.fullmatch(r"(b )*a ", sentence)


def test_seeded_source_is_reproducible():
    grammar = parse_grammar("{ <S> <W> <W> <W> ; } { <W> x ; y ; z ; }")
    first = generate_sentence(grammar, grammar.start_symbol, make_random_source(42))
    second = generate_sentence(grammar, grammar.start_symbol, make_random_source(42))
    assert first == second


def test_out_of_range_choice_is_rejected():
    grammar = parse_grammar(RECURSIVE)
    with pytest.raises(ValueError):
        generate_sentence(grammar, grammar.start_symbol, always(2))


def test_derivation_limit():
    grammar = parse_grammar(RECURSIVE)
    with pytest.raises(DerivationLimitError):
        generate_sentence(grammar, grammar.start_symbol, always(1), max_steps=20)
    assert generate_sentence(grammar, grammar.start_symbol, sequence_source([1, 0]), max_steps=2) == "b a "


def test_sequence_source_repeats_last_index():
    source = sequence_source([1, 0])
    assert [source(3) for _ in range(4)] == [1, 0, 0, 0]
    with pytest.raises(ValueError):
        sequence_source([])


def test_generate_sentences():
    grammar = parse_grammar(RECURSIVE)
    sentences = list(generate_sentences(grammar, 5, always(0)))
    assert sentences == ["a "] * 5


def test_generate_sentences_needs_start_symbol():
    with pytest.raises(EmptyGrammarError):
        generate_sentences(parse_grammar("nothing"), 3, always(0))
