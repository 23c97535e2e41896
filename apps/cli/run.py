# apps/cli/run.py
"""
CLI entry point for replaying wordscramble games.

This script:
  1) Validates the start-word list (prints counts + SHA).
  2) Loads the start words and the dictionary, then starts a game.
  3) Replays a transcript (one submission per line) with a progress bar and writes:
       - CSV:  one row per submission with outcome, reason and running score
       - JSON: manifest with config, word list hash, git commit, final scores
  4) Persists the best score.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from tqdm import tqdm

from wordscramble.datasets import START_WORDS, load_word_list, pretty_summary, validate_wordlist
from wordscramble.datasets.io import read_lines
from wordscramble.engine import DictionarySpellChecker, WordListLoadError
from wordscramble.harness import run_game
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.prefs import BestScoreStore


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordscramble: replay a game transcript")
    ap.add_argument("--words", default=str(START_WORDS),
                    help="path to start-word list (root word candidates)")
    ap.add_argument("--dictionary", default=None,
                    help="path to dictionary word list (default: bundled dictionary.txt)")
    ap.add_argument("--transcript", required=True,
                    help="text file with one submission per line")
    ap.add_argument("--root", help="force this root word instead of a random pick")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for the root-word pick")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--prefs", default=None,
                    help="best-score file (default: $WORDSCRAMBLE_HOME/prefs.json)")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar",
                    help="show a progress bar while replaying")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, load data, replay the transcript, and write outputs.
    Returns the process exit code (2 if the word list cannot be loaded).
    """
    args = build_parser().parse_args(argv)

    # 1) Validate the start-word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) Load data; without the word list or dictionary the game cannot start
    try:
        words = load_word_list(args.words)
        checker = DictionarySpellChecker.from_file(args.dictionary)
    except WordListLoadError as e:
        sys.stderr.write(f"startup error: {e}\n")
        return 2
    try:
        submissions = read_lines(args.transcript)
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"could not read transcript {args.transcript}: {e}\n")
        return 1

    store = BestScoreStore(args.prefs)

    # 3) Replay with progress
    iterator = submissions
    if args.progress == "bar":
        iterator = tqdm(submissions, ncols=80, desc="Replaying", unit="word")
    result = run_game(words, iterator, checker, seed=args.seed,
                      best_score=store.load(), root_word=args.root)
    print(f"Root word: {result['root_word']}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"game_{run_id}.csv"
    manifest_path = outdir / f"game_{run_id}_manifest.json"

    write_csv(result, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        **{k: v for k, v in result.items() if k != "turns"},
        "num_submissions": len(result["turns"]),
    }
    write_manifest(manifest, str(manifest_path))

    if store.record(result["best_score"]):
        print(f"New best score: {result['best_score']}")

    print(f"Score: {result['score']} (best {result['best_score']}) | "
          f"accepted={result['accepted']} rejected={result['rejected']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
