"""
Glicko 2 over a fixed list of indexed competitors
paper: http://www.glicko.net/research/dpcmsv.pdf
example: http://www.glicko.net/glicko/glicko2.pdf

"""
import numpy as np
from glickit.core.base import OnlineRatingSystem
from glickit.core.estimation import EstimationState
from glickit.core.exceptions import InvalidScoreError
from glickit.core.rating import Rating
from glickit.utils.math_utils import g_vector, sigmoid


class Glicko2(OnlineRatingSystem):
    """
    Implements the Glicko 2 rating system, designed by Mark Glickman.

    Every competitor keeps an EstimationState. A rating period stays open until a later
    time step shows up for that competitor, the elapsed periods are closed lazily at that point.
    """

    rating_dim = 2

    def __init__(
        self,
        competitors: list,
        initial_rating: float = 1500.0,
        initial_rd: float = 350.0,
        initial_sigma: float = 0.06,
        tau: float = 0.5,
    ):
        """Initializes the Glicko 2 rating system with the given parameters."""
        super().__init__(competitors)
        initial = Rating(initial_rating, initial_rd, initial_sigma)
        self.states = [EstimationState(initial, tau=tau) for _ in range(self.num_competitors)]
        # -1 until a competitor plays for the first time, idle time before that does not count
        self.last_time_steps = np.full(shape=self.num_competitors, fill_value=-1, dtype=np.int64)
        self.tau = tau

    def set_rating(self, competitor_idx: int, rating: Rating):
        """seed a competitor, discards anything accumulated in its open period"""
        self.states[competitor_idx] = EstimationState(rating, tau=self.tau)

    def rating_arrays(self):
        """current (mus, phis, sigmas) of every competitor on the glicko-2 scale"""
        scaled = np.array([state.rating().to_scale() for state in self.states], dtype=np.float64)
        return scaled[:, 0], scaled[:, 1], scaled[:, 2]

    def predict(self, matchups: np.ndarray, time_step: int = None):
        """generate predictions"""
        mus, phis, _ = self.rating_arrays()
        mu_diff = mus[matchups[:, 0]] - mus[matchups[:, 1]]
        combined_phi = np.sqrt(np.square(phis[matchups[:, 0]]) + np.square(phis[matchups[:, 1]]))
        return sigmoid(g_vector(combined_phi) * mu_diff)

    def get_pre_match_ratings(self, matchups: np.ndarray, time_step: int = None):
        mus, phis, _ = self.rating_arrays()
        means = mus[matchups]
        devs = phis[matchups]
        ratings = np.concatenate((means[..., None], devs[..., None]), axis=2).reshape(means.shape[0], -1)
        return ratings

    def advance(self, time_step: int, competitor_idxs=None):
        """close every rating period before time_step for the given competitors, all of them by default"""
        if competitor_idxs is None:
            competitor_idxs = np.arange(self.num_competitors)
        for idx in competitor_idxs:
            last_time_step = self.last_time_steps[idx]
            if last_time_step < 0:
                continue
            for _ in range(time_step - last_time_step):
                self.states[idx].fix(self.tau)
            self.last_time_steps[idx] = max(last_time_step, time_step)

    def update(self, matchups: np.ndarray, outcomes: np.ndarray, time_step: int, **kwargs):
        """all matchups of one time step are rated against the ratings from before the batch"""
        outcomes = np.asarray(outcomes, dtype=np.float64)
        invalid = ~((outcomes >= 0.0) & (outcomes <= 1.0))
        if np.any(invalid):
            raise InvalidScoreError(float(outcomes[invalid][0]))
        active_in_period = np.unique(matchups)
        self.advance(time_step, active_in_period)
        first_timers = active_in_period[self.last_time_steps[active_in_period] < 0]
        self.last_time_steps[first_timers] = time_step

        snapshot = {idx: self.states[idx].rating() for idx in active_in_period}
        for (comp_1, comp_2), outcome in zip(matchups, outcomes):
            self.states[comp_1].apply_match(snapshot[comp_2], float(outcome))
            self.states[comp_2].apply_match(snapshot[comp_1], 1.0 - float(outcome))

    def print_leaderboard(self, num_places=None):
        ratings = [state.rating() for state in self.states]
        sort_array = np.array([rating.interval()[0] for rating in ratings])
        num_places = self.num_competitors if num_places is None else min(num_places, self.num_competitors)
        sorted_idxs = np.argsort(-sort_array)[:num_places]
        max_len = min(np.max([len(str(comp)) for comp in self.competitors] + [10]), 25)
        print(f'{"competitor": <{max_len}}\t{"rating - (2*dev)"}\t')
        for comp_idx in sorted_idxs:
            print(f'{str(self.competitors[comp_idx]): <{max_len}}\t{sort_array[comp_idx]:.2f}')
