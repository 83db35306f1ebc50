import argparse, sys
from data_builder.cfg import load_grammar
from data_builder.errors import GrammarError
from data_builder.generate import generate_sentences, make_random_source
from utils.grammar_utils import write_sentences
from gen_hyperparams import GRAMMAR_ENCODING, N_SENTENCES, RES_PATH, MAX_DERIVATION_STEPS


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--grammar", required=True, help="grammar file path")
    parser.add_argument("--output", default=RES_PATH, help="where to write the sentences")
    parser.add_argument("--n_sentences", type=int, default=N_SENTENCES)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max_steps", type=int, default=MAX_DERIVATION_STEPS)
    parser.add_argument("--disable_progress", action="store_true")
    args = parser.parse_args(argv)

    try:
        cf_grammar = load_grammar(args.grammar, encoding=GRAMMAR_ENCODING)
        sentences = generate_sentences(
            cf_grammar,
            args.n_sentences,
            make_random_source(args.seed),
            progress=not args.disable_progress,
            max_steps=args.max_steps,
        )
        n = write_sentences(args.output, sentences, encoding=GRAMMAR_ENCODING)
    except GrammarError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"{n} sentences written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
