import itertools
import random

import pytest

from rookpairing.controllers import TournamentController


def record_all(controller, winner="player1"):
    """Record every pending match of the open round, player1 (or player2) winning."""
    round_data = controller.tournament.current_round
    for match in list(round_data.pending_matches):
        winner_id = match.player1_id if winner == "player1" else match.player2_id
        controller.record_result(match.id, winner_id=winner_id)


def pair_key(match):
    return frozenset((match.player1_id, match.player2_id))


@pytest.fixture
def make_controller():
    """Factory for a controller over a fresh tournament with named players."""

    def _make(mode="swiss", names=(), seed=1234, num_rounds=None, ratings=None, **kwargs):
        counter = itertools.count(1)
        controller = TournamentController.create(
            f"{mode.title()} Test",
            mode=mode,
            num_rounds=num_rounds,
            id_factory=lambda: f"id-{next(counter)}",
            rng=random.Random(seed),
            **kwargs,
        )
        for index, name in enumerate(names):
            rating = ratings[index] if ratings else None
            controller.add_player(name, rating=rating)
        return controller

    return _make
