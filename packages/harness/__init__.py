from .config import GameConfig, DEFAULT_OPENING, DEFAULT_WORKERS
from .core import run_case, simulate, run_batch, summarize, WORDLE_PAR
from .sources import SimulatedFeedback, InteractiveFeedback
from .io import write_csv, write_manifest

__all__ = [
    "GameConfig", "DEFAULT_OPENING", "DEFAULT_WORKERS",
    "run_case", "simulate", "run_batch", "summarize", "WORDLE_PAR",
    "SimulatedFeedback", "InteractiveFeedback",
    "write_csv", "write_manifest",
]
