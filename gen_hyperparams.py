GRAMMAR_ENCODING = "utf-8"
N_SENTENCES = 1000
RES_PATH = "data/grammar_sentences.txt"
MAX_DERIVATION_STEPS = None  # None = unlimited

USAGE_TEMPLATE = "Usage: {program} [filepath]"
ERROR_MSG_READ_FILE = "ERROR: File could not be read."
