"""Widgets for the monitor screen."""

from alcomonitor.widgets.reading_panel import ReadingPanel, score_band
from alcomonitor.widgets.score_table import ScoreTable, rank_badge, score_style

__all__ = [
    "ReadingPanel",
    "ScoreTable",
    "rank_badge",
    "score_band",
    "score_style",
]
