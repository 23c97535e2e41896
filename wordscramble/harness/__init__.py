from .core import play_transcript, run_game
from .io import write_csv, write_manifest

__all__ = ["play_transcript", "run_game", "write_csv", "write_manifest"]
