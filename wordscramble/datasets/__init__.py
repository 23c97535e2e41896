from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, load_word_list, START_WORDS

__all__ = ["validate_wordlist", "pretty_summary", "load_word_list", "START_WORDS"]
