from .word import Word, WORD_LENGTH
from .scoring import (
    Status, Feedback, Notation, NOTATIONS, DEFAULT_NOTATION, get_notation, compute, parse,
)
from .constraints import is_consistent, filter_candidates
from .errors import (
    WordleError, MalformedWord, MalformedFeedback, FeedbackSourceTerminated,
    InconsistentFeedback, TurnLimitExceeded,
)

__all__ = [
    "Word", "WORD_LENGTH",
    "Status", "Feedback", "Notation", "NOTATIONS", "DEFAULT_NOTATION", "get_notation",
    "compute", "parse",
    "is_consistent", "filter_candidates",
    "WordleError", "MalformedWord", "MalformedFeedback", "FeedbackSourceTerminated",
    "InconsistentFeedback", "TurnLimitExceeded",
]
