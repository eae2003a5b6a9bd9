"""Players and teams, the things a match can be played between"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List
from glickit.core.estimation import EstimationState
from glickit.core.exceptions import InvalidScoreError, ParticipantError, StaleMatchError
from glickit.core.rating import Rating, average
from glickit.utils.constants import SCORE_DRAW, SCORE_LOSE, SCORE_WIN

logger = logging.getLogger(__name__)


class Participant(ABC):
    """
    A side of a match. Players and teams are the only two kinds.
    """

    name: str

    @abstractmethod
    def rating(self) -> Rating:
        """current rating including the evidence of the open period"""

    @abstractmethod
    def apply_match(self, opponent: Rating, score: float):
        """reflect one result against an opponent's rating at match time"""

    @abstractmethod
    def check_outcome_at(self, outcome_at: datetime):
        """raise StaleMatchError if a match at outcome_at can no longer be accepted"""

    @abstractmethod
    def prepare(self, outcome_at: datetime, rating_period: timedelta, tau: float):
        """close every rating period that ended before outcome_at"""


@dataclass
class GameCount:
    """win/lose/draw tally of a player"""

    win: int = 0
    lose: int = 0
    draw: int = 0

    def record(self, score: float):
        if score == SCORE_WIN:
            self.win += 1
        elif score == SCORE_LOSE:
            self.lose += 1
        elif score == SCORE_DRAW:
            self.draw += 1

    def __str__(self):
        return f'({self.win}/{self.lose}/{self.draw})'


class Player(Participant):
    """
    A rated individual.

    Parameters:
        name (str): how the player shows up in logs and reprs
        rating (Rating): rating at the start of the open period
        fixed_at (datetime): start of the open period, already truncated to the rating period
        tau (float): system constant in effect
    """

    def __init__(self, name: str, rating: Rating, fixed_at: datetime, tau: float = 0.5):
        self.name = name
        self.estimated = EstimationState(rating, tau=tau)
        self.fixed_at = fixed_at
        self.game_count = GameCount()

    def rating(self) -> Rating:
        return self.estimated.rating()

    def apply_match(self, opponent: Rating, score: float):
        self.estimated.apply_match(opponent, score)
        self.game_count.record(score)

    def check_outcome_at(self, outcome_at: datetime):
        if outcome_at < self.fixed_at:
            raise StaleMatchError(self.name, outcome_at, self.fixed_at)

    def prepare(self, outcome_at: datetime, rating_period: timedelta, tau: float):
        self.check_outcome_at(outcome_at)
        closed = 0
        while outcome_at - self.fixed_at > rating_period:
            self.estimated.fix(tau)
            self.fixed_at += rating_period
            closed += 1
        if closed:
            logger.debug('%s: closed %d rating periods, now fixed at %s', self.name, closed, self.fixed_at)

    def __repr__(self):
        return f'Player({self.name!r}, {self.rating()!r}, fixed_at={self.fixed_at!r})'

    def __str__(self):
        return f'{self.name}:{self.rating()}{self.game_count}'


class Team(Participant):
    """
    Several players rated as one side.
    paper: http://rhetoricstudios.com/downloads/AbstractingGlicko2ForTeamGames.pdf
    """

    def __init__(self, name: str, members: List[Player]):
        if not members:
            raise ParticipantError(f'team {name} needs at least one member')
        self.name = name
        self.members = list(members)

    def rating(self) -> Rating:
        # members move between calls, never cache this
        return average([member.rating() for member in self.members])

    def apply_match(self, opponent: Rating, score: float):
        """every member gets the same result against the opponent"""
        if not 0.0 <= score <= 1.0:
            raise InvalidScoreError(score)
        for member in self.members:
            member.apply_match(opponent, score)

    def check_outcome_at(self, outcome_at: datetime):
        for member in self.members:
            member.check_outcome_at(outcome_at)

    def prepare(self, outcome_at: datetime, rating_period: timedelta, tau: float):
        self.check_outcome_at(outcome_at)
        for member in self.members:
            member.prepare(outcome_at, rating_period, tau)

    def __repr__(self):
        return f'Team({self.name!r}, {self.members!r})'

    def __str__(self):
        return f'{self.name}:{{ ' + ' '.join(str(member) for member in self.members) + ' }'

