from rookpairing.models.match import Match
from rookpairing.models.pairing_result import PairingResult
from rookpairing.models.player import Player
from rookpairing.models.round_data import RoundData
from rookpairing.models.standings import StandingsEntry
from rookpairing.models.team import Team
from rookpairing.models.tournament import Tournament
from rookpairing.models.tournament_config import TournamentConfig

__all__ = [
    "Match",
    "PairingResult",
    "Player",
    "RoundData",
    "StandingsEntry",
    "Team",
    "Tournament",
    "TournamentConfig",
]
