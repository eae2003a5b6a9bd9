"""base class for online rating systems"""
from abc import ABC
from typing import Optional
import numpy as np
from glickit.utils.data_utils import MatchupDataset


class OnlineRatingSystem(ABC):
    """
    Base class for online rating systems over a fixed list of indexed competitors.

    Attributes:
        rating_dim (int): Dimension of competitor ratings, 2 for systems with a mean and a deviation.
        competitors (list): A list of competitors within the rating system.
        num_competitors (int): The number of competitors in the system.
    """

    rating_dim: int

    def __init__(self, competitors):
        """
        Parameters:
            competitors (list): A list of competitors to be included in the rating system.
        """
        self.competitors = competitors
        self.num_competitors = len(competitors)

    def print_leaderboard(self, num_places=None):
        """
        Prints the leaderboard of the rating system.

        Parameters:
            num_places int: The number of top places to display on the leaderboard.
        """
        raise NotImplementedError

    def predict(self, matchups: np.ndarray, time_step: int = None):
        """probability that the first competitor of each matchup wins"""
        raise NotImplementedError

    def update(self, matchups: np.ndarray, outcomes: np.ndarray, time_step: Optional[int]):
        """
        Updates competitor ratings based on new matchup results.

        Parameters:
            matchups (np.ndarray): Array of matchups, where each matchup is represented by a pair of competitor indices
            outcomes (np.ndarray): Array of outcomes corresponding to each matchup represented as win (1), loss (0), or draw (0.5).
            time_step (int): The current rating period, used to adjust ratings over time.
        """
        raise NotImplementedError

    def get_pre_match_ratings(self, matchups: np.ndarray, time_step: Optional[int] = None) -> np.ndarray:
        """
        Returns the ratings for competitors at the timestep of the matchups
        Useful when using pre-match ratings as features in downstream ML pipelines

        Parameters:
            matchups (np.ndarray of shape (n,2)): competitor indices
            time_step (optional int)

        Returns:
            np.ndarray of shape (n, 2 * rating_dim): ratings for specified competitors
        """
        raise NotImplementedError

    def fit_batch(
        self,
        matchups: np.ndarray,
        outcomes: np.ndarray,
        time_step: int = None,
        return_pre_match_probs: bool = False,
        return_pre_match_ratings: bool = False,
    ):
        outputs = []
        if return_pre_match_probs:
            outputs.append(self.predict(matchups=matchups, time_step=time_step))
        if return_pre_match_ratings:
            outputs.append(self.get_pre_match_ratings(matchups, time_step=time_step))
        self.update(matchups, outcomes, time_step=time_step)
        return tuple(outputs)

    def fit_dataset(
        self,
        dataset: MatchupDataset,
        return_pre_match_probs: bool = False,
        return_pre_match_ratings: bool = False,
    ):
        """run a rating system over a dataset, optionally collecting what it predicted before every batch"""
        n_matchups = len(dataset)
        pre_match_probs = np.empty(shape=(n_matchups,)) if return_pre_match_probs else None
        pre_match_ratings = np.empty(shape=(n_matchups, 2 * self.rating_dim)) if return_pre_match_ratings else None

        idx = 0
        for matchups, outcomes, time_step in dataset:
            batch_outputs = list(
                self.fit_batch(
                    matchups=matchups,
                    outcomes=outcomes,
                    time_step=time_step,
                    return_pre_match_probs=return_pre_match_probs,
                    return_pre_match_ratings=return_pre_match_ratings,
                )
            )
            end_idx = idx + matchups.shape[0]
            if return_pre_match_probs:
                pre_match_probs[idx:end_idx] = batch_outputs.pop(0)
            if return_pre_match_ratings:
                pre_match_ratings[idx:end_idx] = batch_outputs.pop(0)
            idx = end_idx

        if return_pre_match_probs and return_pre_match_ratings:
            return pre_match_probs, pre_match_ratings
        elif return_pre_match_probs:
            return pre_match_probs
        elif return_pre_match_ratings:
            return pre_match_ratings
