import os, tempfile

from data_builder.errors import GrammarFileError

def get_grammar_text(grammar_path, encoding="utf-8"):
    if not os.path.isfile(grammar_path):
        raise GrammarFileError(grammar_path, "no such file")
    try:
        with open(grammar_path, 'r', encoding=encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise GrammarFileError(grammar_path, str(e)) from e
    return text

def write_sentences(res_path, sentences, encoding="utf-8"):
    """Write one sentence per line, dropping the trailing separator space. Returns the line count."""
    dirname = os.path.dirname(res_path)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    # res_path is only replaced once every sentence has been written
    fd, tmp_path = tempfile.mkstemp(dir=dirname or ".", prefix=".sentences_", suffix=".tmp")
    n = 0
    try:
        with os.fdopen(fd, "w", encoding=encoding) as tgt_file:
            for sentence in sentences:
                tgt_file.write(sentence.rstrip(" ") + "\n")
                n += 1
        os.replace(tmp_path, res_path)
    except BaseException:
        os.remove(tmp_path)
        raise
    return n
