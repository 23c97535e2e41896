"""
Download an English word list and rebuild the bundled data files.

What it does:
- Downloads a plain-text word list (one word per line).
- Keeps lowercase a–z tokens, de-duplicates while preserving order.
- Writes the dictionary (all words of --min-length letters or more).
- Writes the start list: words of exactly --root-length letters, optionally
  limited to the first --limit entries after an optional shuffle.

Usage:
    python -m script.fetch_words
    python -m script.fetch_words --root-length 8 --limit 500 --seed 7
"""

import argparse
import random

import requests

from wordscramble.datasets.io import DATA_DIR, write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean(lines, min_length: int) -> list[str]:
    words = (ln.strip().lower() for ln in lines)
    return unique_preserve_order(
        w for w in words if w.isascii() and w.isalpha() and len(w) >= min_length
    )


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def main():
    ap = argparse.ArgumentParser(description="Rebuild dictionary.txt and start.txt")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--min-length", type=int, default=4,
                    help="shortest word kept in the dictionary")
    ap.add_argument("--root-length", type=int, default=8,
                    help="exact length of start (root) words")
    ap.add_argument("--limit", type=int, help="keep at most this many start words")
    ap.add_argument("--seed", type=int, help="shuffle start words with this seed before --limit")
    ap.add_argument("--dictionary-out", default=str(DATA_DIR / "dictionary.txt"))
    ap.add_argument("--start-out", default=str(DATA_DIR / "start.txt"))
    args = ap.parse_args()

    words = clean(fetch_words(args.url), args.min_length)
    roots = [w for w in words if len(w) == args.root_length]
    if args.seed is not None:
        random.Random(args.seed).shuffle(roots)
    if args.limit:
        roots = roots[: args.limit]

    write_lines(words, args.dictionary_out)
    write_lines(roots, args.start_out)
    print(f"Wrote {len(words)} dictionary words -> {args.dictionary_out}")
    print(f"Wrote {len(roots)} start words -> {args.start_out}")


if __name__ == "__main__":
    main()
