from rookpairing.controllers.elimination import EliminationCascade
from rookpairing.controllers.result_recorder import ResultRecorder
from rookpairing.controllers.round_manager import RoundManager
from rookpairing.controllers.score_ledger import ScoreLedger, outcome_delta, outcome_effect
from rookpairing.controllers.standings import build_standings, rank_players
from rookpairing.controllers.tournament_controller import TournamentController

__all__ = [
    "EliminationCascade",
    "ResultRecorder",
    "RoundManager",
    "ScoreLedger",
    "TournamentController",
    "build_standings",
    "outcome_delta",
    "outcome_effect",
    "rank_players",
]
