"""utils for evaluating rating systems and picking their parameters"""
import time
from functools import partial
from multiprocessing import Pool
import numpy as np
from glickit.core.base import OnlineRatingSystem
from glickit.metrics import binary_metrics_suite
from glickit.utils.data_utils import MatchupDataset


def evaluate(model: OnlineRatingSystem, dataset: MatchupDataset, metrics_mask: np.ndarray = None):
    """evaluate a rating system on a dataset using the probabilities it gave before every batch"""
    start_time = time.time()
    if metrics_mask is None:
        metrics_mask = np.ones(len(dataset), dtype=np.bool_)
    probs = model.fit_dataset(dataset, return_pre_match_probs=True)[metrics_mask]
    outcomes = dataset.outcomes[metrics_mask]
    duration = time.time() - start_time
    metrics = binary_metrics_suite(probs, outcomes)
    metrics['duration'] = duration
    return metrics


def eval_wrapper(params, rating_system_class, dataset, metrics_mask):
    model = rating_system_class(competitors=dataset.competitors, **params)
    return evaluate(model, dataset, metrics_mask)


def grid_search(
    rating_system_class,
    dataset,
    param_configurations,
    metrics_mask=None,
    metric='log_loss',
    minimize_metric=True,
    num_processes=None,
):
    """
    Evaluate every parameter configuration and return the best one with its metrics.
    glicko 2 says tau should be chosen by trying a few values, e.g. [{'tau': t} for t in (0.3, 0.6, 1.2)]
    """
    func = partial(eval_wrapper, rating_system_class=rating_system_class, dataset=dataset, metrics_mask=metrics_mask)
    if num_processes:
        with Pool(num_processes) as pool:
            all_metrics = pool.map(func, param_configurations)
    else:
        all_metrics = list(map(func, param_configurations))

    metric_multiplier = 1.0 if minimize_metric else -1.0
    best_idx = int(np.argmin([metrics[metric] * metric_multiplier for metrics in all_metrics]))
    return param_configurations[best_idx], all_metrics[best_idx]
