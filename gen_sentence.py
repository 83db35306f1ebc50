import argparse, os, sys
from data_builder.cfg import load_grammar
from data_builder.errors import EmptyGrammarError, GrammarFileError, UndefinedNonterminalError, DerivationLimitError
from data_builder.generate import generate_sentence, make_random_source
from gen_hyperparams import GRAMMAR_ENCODING, MAX_DERIVATION_STEPS, USAGE_TEMPLATE, ERROR_MSG_READ_FILE


def main(argv=None, program=None):
    if program is None:
        program = os.path.basename(sys.argv[0]) or "gen_sentence.py"
    usage = USAGE_TEMPLATE.format(program=program)

    parser = argparse.ArgumentParser(prog=program, usage=usage[len("Usage: "):])
    parser.add_argument("filepath", nargs="?", default=None, help="grammar file path")
    parser.add_argument("--seed", type=int, default=None, help="random seed, for reproducible sentences")
    parser.add_argument("--nltk", action="store_true", help="print the grammar as an nltk CFG instead of generating")
    parser.add_argument("--max_steps", type=int, default=MAX_DERIVATION_STEPS)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.filepath is None:
        print(usage)
        return 2

    try:
        grammar = load_grammar(args.filepath, encoding=GRAMMAR_ENCODING)
        start_symbol = grammar.require_start_symbol()
    except (GrammarFileError, EmptyGrammarError):
        print(ERROR_MSG_READ_FILE)
        print(usage)
        print("")
        return 1

    if args.verbose:
        print(f"Loaded {len(grammar)} non-terminals from {args.filepath}, start symbol {start_symbol}")

    if args.nltk:
        print(grammar.to_nltk())
        return 0

    try:
        sentence = generate_sentence(grammar, start_symbol, make_random_source(args.seed), max_steps=args.max_steps)
    except (UndefinedNonterminalError, DerivationLimitError) as e:
        print(f"ERROR: {e}")
        return 1

    print(sentence)
    return 0


if __name__ == "__main__":
    sys.exit(main())
