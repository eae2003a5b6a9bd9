"""metrics for judging how well a rating system predicts, e.g. when choosing tau"""

import numpy as np


def binary_accuracy(probs: np.ndarray, outcomes: np.ndarray) -> float:
    """compute accuracy where outcomes is binary ties count for half"""
    pos_mask = probs > 0.5
    neg_mask = probs < 0.5
    draw_mask = probs == 0.5
    correct = outcomes[pos_mask].sum() + (1.0 - outcomes[neg_mask]).sum() + 0.5 * draw_mask.sum()
    return correct / probs.shape[0]


def binary_log_loss(probs: np.ndarray, outcomes: np.ndarray, eps: float = 1e-6) -> float:
    """compute log loss, draws count as half a win and half a loss"""
    probs = np.clip(probs, eps, 1 - eps)
    loss_array = -(np.log(probs) * outcomes) - (np.log(1.0 - probs) * (1.0 - outcomes))
    return loss_array.mean()


def brier_score(probs: np.ndarray, outcomes: np.ndarray) -> float:
    """compute the brier score, which is equivalent to the MSE"""
    return np.square(probs - outcomes).mean()


def binary_metrics_suite(probs: np.ndarray, outcomes: np.ndarray):
    """a wrapper for running a bunch of binary metrics"""
    metrics = {
        'accuracy': binary_accuracy(probs, outcomes),
        'log_loss': binary_log_loss(probs, outcomes),
        'brier_score': brier_score(probs, outcomes),
    }
    return metrics
