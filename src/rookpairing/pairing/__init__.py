from rookpairing.pairing.cup import create_cup_pairings
from rookpairing.pairing.round_robin import (
    create_round_robin_pairings,
    round_robin_round_count,
)
from rookpairing.pairing.swiss import create_swiss_pairings

__all__ = [
    "create_cup_pairings",
    "create_round_robin_pairings",
    "create_swiss_pairings",
    "round_robin_round_count",
]
