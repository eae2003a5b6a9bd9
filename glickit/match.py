"""Applying the outcome of one match to every participant"""
import logging
from datetime import datetime
from typing import Callable, Dict, Optional
from glickit.configs import Config
from glickit.core.exceptions import ParticipantError
from glickit.core.rating import Rating
from glickit.participants import Participant
from glickit.utils.constants import SCORE_DRAW, SCORE_LOSE, SCORE_WIN

logger = logging.getLogger(__name__)

ApplyStrategy = Callable[[Dict[Participant, Rating], Dict[Participant, float]], None]


def pairwise_score(result: float, opponent_result: float) -> float:
    """higher result wins, equal results draw"""
    if result > opponent_result:
        return SCORE_WIN
    if result == opponent_result:
        return SCORE_DRAW
    return SCORE_LOSE


def round_robin(ratings: Dict[Participant, Rating], results: Dict[Participant, float]):
    """
    Treat a multiplayer match as if every participant played every other one.

    Parameters:
        ratings: snapshot of every participant's rating taken before any update
        results: outcome value of every participant, higher is better
    """
    for target, result in results.items():
        for opponent, opponent_result in results.items():
            if target is opponent:
                continue
            target.apply_match(ratings[opponent], pairwise_score(result, opponent_result))


def prepare_all(participants, outcome_at: datetime, config: Config):
    """validate every participant against outcome_at before closing anyone's periods"""
    for participant in participants:
        participant.check_outcome_at(outcome_at)
    for participant in participants:
        participant.prepare(outcome_at, config.rating_period, config.tau)


class Match:
    """
    Two or more players/teams competing at once. Results are accumulated with add
    and reflected in everyone's rating by apply.
    """

    def __init__(self, *participants: Participant, apply_strategy: ApplyStrategy = round_robin):
        if len(participants) < 2:
            raise ParticipantError('two or more participants are required for a match')
        if len(set(map(id, participants))) != len(participants):
            raise ParticipantError('a participant can only join a match once')
        self._results = {participant: 0.0 for participant in participants}
        self.apply_strategy = apply_strategy

    def add(self, participant: Participant, result: float):
        if participant not in self._results:
            raise ParticipantError(f'{participant.name} did not join this match')
        self._results[participant] += result

    def reset(self):
        for participant in self._results:
            self._results[participant] = 0.0

    def results(self) -> Dict[Participant, float]:
        return dict(self._results)

    def ratings(self) -> Dict[Participant, Rating]:
        return {participant: participant.rating() for participant in self._results}

    def apply(self, outcome_at: datetime, config: Config):
        """close overdue periods, snapshot ratings, then apply the accumulated results"""
        prepare_all(self._results, outcome_at, config)
        ratings = self.ratings()
        results = self.results()
        logger.debug('applying match at %s: %s', outcome_at, {p.name: r for p, r in results.items()})
        self.apply_strategy(ratings, results)
        self.reset()

    def win_probs(self) -> Dict[Participant, float]:
        """probability that each participant beats all of the others"""
        ratings = self.ratings()
        probs = {}
        for target, rating in ratings.items():
            probs[target] = 1.0
            for opponent, opponent_rating in ratings.items():
                if target is opponent:
                    continue
                probs[target] *= rating.win_prob(opponent_rating)
        return probs

    def __str__(self):
        probs = self.win_probs()
        ordered = sorted(probs, key=lambda participant: participant.name)
        return '[' + ''.join(f' {participant}({probs[participant]:0.2f}) ' for participant in ordered) + ']'


class Duel:
    """
    A two sided match. winner is None when nobody won, which rates as a draw for both.
    """

    def __init__(
        self,
        left: Participant,
        right: Participant,
        winner: Optional[Participant] = None,
        outcome_at: Optional[datetime] = None,
    ):
        if left is None or right is None:
            raise ParticipantError('a duel needs both a left and a right participant')
        if left is right:
            raise ParticipantError('both sides of a duel are the same participant')
        if not (winner is None or winner is left or winner is right):
            raise ParticipantError(f'winner {winner.name} did not play in this duel')
        self.left = left
        self.right = right
        self.winner = winner
        self.outcome_at = outcome_at

    def score_against(self, opponent: Participant) -> float:
        if self.winner is None:
            return SCORE_DRAW
        if self.winner is opponent:
            return SCORE_LOSE
        return SCORE_WIN

    def apply(self, config: Config):
        outcome_at = self.outcome_at if self.outcome_at is not None else config.now()
        prepare_all((self.left, self.right), outcome_at, config)
        # snapshot before either side moves
        left_rating = self.left.rating()
        right_rating = self.right.rating()
        self.left.apply_match(right_rating, self.score_against(self.right))
        self.right.apply_match(left_rating, self.score_against(self.left))
