"""
Models Module
=============

Rating systems over a fixed list of indexed competitors, fed one batch of matchups per time step.

Included Rating Systems:
- Glicko2: Glickman's Glicko-2 system built on the online accumulator in glickit.core, with lazy rating period closing.

Each rating system is a subclass of glickit.core.base.OnlineRatingSystem and can be run over a
glickit.utils.data_utils.MatchupDataset with fit_dataset and evaluated with glickit.eval.
"""
