from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from wordscramble.engine.errors import WordListLoadError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
START_WORDS = DATA_DIR / "start.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_word_list(p: Optional[Path | str] = None) -> Tuple[str, ...]:
    """
    Load the start-word list (bundled start.txt unless a path is given).

    Words are stripped and lowercased; blank lines are dropped. The result is
    an immutable tuple in file order.

    Raises WordListLoadError if the file is missing or unreadable, since the
    game cannot start without it.
    """
    p = Path(p) if p is not None else START_WORDS
    try:
        lines = read_lines(p)
    except FileNotFoundError as e:
        raise WordListLoadError(p, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise WordListLoadError(p, str(e)) from e

    words = tuple(w.strip().lower() for w in lines if w.strip())
    logger.info("Loaded %s start words from %s", len(words), p)
    return words
