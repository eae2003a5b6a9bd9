"""Entry point for rating players and teams over time"""
import logging
from datetime import datetime
from typing import Dict, List, Optional
from glickit.configs import Config
from glickit.core.exceptions import ParticipantError
from glickit.core.rating import Rating
from glickit.match import Match, prepare_all, round_robin
from glickit.participants import Participant, Player, Team
from glickit.utils.date_utils import truncate

logger = logging.getLogger(__name__)


class Service:
    """
    Creates players, teams and matches that share one configuration.

    Parameters:
        config (Config, optional): system settings, defaults to Config()
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()

    def new_player(self, name: str, rating: Rating, fixed_at: Optional[datetime] = None) -> Player:
        fixed_at = fixed_at if fixed_at is not None else self.config.now()
        return Player(name, rating, truncate(fixed_at, self.config.rating_period), tau=self.config.tau)

    def new_default_player(self, name: str) -> Player:
        return self.new_player(name, Rating.default(self.config.initial_volatility()))

    def new_team(self, name: str, members: List[Player]) -> Team:
        return Team(name, members)

    def new_match(self, *participants: Participant) -> Match:
        return Match(*participants)

    def apply(self, match: Match, outcome_at: Optional[datetime] = None):
        """reflect the results accumulated in match at outcome_at, defaults to now"""
        match.apply(outcome_at if outcome_at is not None else self.config.now(), self.config)

    def apply_outcome(self, outcome: Dict[Participant, float], outcome_at: Optional[datetime] = None):
        """
        One-shot form of apply for callers that already know every participant's result.

        Parameters:
            outcome: result of every participant, higher is better
            outcome_at: when the match happened, defaults to now
        """
        if len(outcome) < 2:
            raise ParticipantError('two or more participants are required for a match')
        outcome_at = outcome_at if outcome_at is not None else self.config.now()
        logger.debug('applying outcome at %s for %s', outcome_at, [participant.name for participant in outcome])
        prepare_all(outcome, outcome_at, self.config)
        ratings = {participant: participant.rating() for participant in outcome}
        round_robin(ratings, outcome)
