"""Exceptions raised by the rating engine.

Every rejected call leaves the state it was given untouched, so callers can
catch these and carry on with the same objects.
"""


class RatingError(Exception):
    """Base exception for all glickit errors."""

    pass


class InvalidScoreError(RatingError, ValueError):
    """A match score outside of [0, 1]."""

    def __init__(self, score):
        self.score = score
        super().__init__(f'score must be 0 to 1 (win = 1, lose = 0, draw = 0.5), got {score}')


class LengthMismatchError(RatingError, ValueError):
    """Batch update with a different number of opponents and scores."""

    def __init__(self, num_opponents: int, num_scores: int):
        self.num_opponents = num_opponents
        self.num_scores = num_scores
        super().__init__(f'opponents and scores length mismatch: {num_opponents} != {num_scores}')


class InvalidParameterError(RatingError, ValueError):
    """A system parameter such as tau or the rating period is out of range."""

    pass


class SolverNonConvergenceError(RatingError, RuntimeError):
    """The volatility solver hit its iteration cap.

    This does not happen for valid Glicko-2 inputs, it signals a broken invariant
    upstream (nan ratings, an infinite accuracy, ...).
    """

    def __init__(self, stage: str, iterations: int):
        self.stage = stage
        self.iterations = iterations
        super().__init__(f'volatility solver did not converge during {stage} after {iterations} iterations')


class StaleMatchError(RatingError, ValueError):
    """A match that happened before the competitor's last closed period."""

    def __init__(self, name, outcome_at, fixed_at):
        self.name = name
        self.outcome_at = outcome_at
        self.fixed_at = fixed_at
        super().__init__(f'match at {outcome_at} for {name} precedes its last fixed period at {fixed_at}')


class ParticipantError(RatingError, ValueError):
    """A malformed match: too few participants, unknown or repeated participants."""

    pass
