from .base import BaseSolver, PartitionSolver
from .partition import best_guess, make_executor, partition_score, score

__all__ = ["BaseSolver", "PartitionSolver", "best_guess", "make_executor", "partition_score", "score"]
