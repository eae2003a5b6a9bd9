"""Classes and functions for working with rating data"""

import math
import numpy as np


class MatchupDataset:
    """
    Paired comparisons grouped into integer rating periods.

    Attributes:
        time_steps (np.ndarray of shape (n,)): rating period of every matchup, non decreasing
        matchups (np.ndarray of shape (n,2)): competitor indices
        outcomes (np.ndarray of shape (n,)): 1.0 if the first competitor won, 0.0 if the second did, 0.5 for a draw
        competitors (list): competitor identifiers, matchups index into this list
    """

    def __init__(self, time_steps: np.ndarray, matchups: np.ndarray, outcomes: np.ndarray, competitors: list):
        if not (time_steps.shape[0] == matchups.shape[0] == outcomes.shape[0]):
            raise ValueError('time_steps, matchups and outcomes must have the same length')
        if np.any(np.diff(time_steps) < 0):
            raise ValueError('time_steps must be sorted')
        self.time_steps = time_steps
        self.matchups = matchups
        self.outcomes = outcomes
        self.competitors = competitors
        self.num_competitors = len(competitors)
        self._process_time_steps()

    @classmethod
    def init_from_arrays(cls, time_steps: np.ndarray, matchups: np.ndarray, outcomes: np.ndarray, competitors: list):
        """Factory method for creating datasets from arrays."""
        return cls(
            time_steps=np.asarray(time_steps),
            matchups=np.asarray(matchups),
            outcomes=np.asarray(outcomes, dtype=np.float64),
            competitors=competitors,
        )

    def _process_time_steps(self):
        """Calculate time period boundaries."""
        self.unique_time_steps, time_indices = np.unique(self.time_steps, return_index=True)
        self.time_step_end_idxs = np.roll(time_indices, -1)
        if self.time_step_end_idxs.shape[0]:
            self.time_step_end_idxs[-1] = len(self.time_steps)

    def __len__(self):
        return self.matchups.shape[0]

    def __iter__(self):
        """Iterate through rating periods."""
        start_idx = 0
        for time_step, end_idx in zip(self.unique_time_steps, self.time_step_end_idxs):
            yield self.matchups[start_idx:end_idx], self.outcomes[start_idx:end_idx], int(time_step)
            start_idx = end_idx

    def __getitem__(self, key):
        if isinstance(key, slice):
            return MatchupDataset(
                time_steps=self.time_steps[key],
                matchups=self.matchups[key],
                outcomes=self.outcomes[key],
                competitors=self.competitors,
            )
        raise ValueError('Only slice indexing supported')


def split_matchup_dataset(dataset, test_fraction=0.2):
    split_idx = math.ceil(len(dataset) * (1.0 - test_fraction))
    return dataset[:split_idx], dataset[split_idx:]
