from .store import BEST_SCORE_KEY, BestScoreStore, default_prefs_path

__all__ = ["BEST_SCORE_KEY", "BestScoreStore", "default_prefs_path"]
