"""Cup elimination cascade.

When a cup match produces a loser, the loser is knocked out and every other
unresolved match they hold in the same round is settled without them: a real
match becomes a forfeit win for the opponent, an unplayed bye is voided.
The cascade is planned first, looking up every player involved, and only
then applied, so a lookup failure leaves the tournament untouched.
"""

# Rook Pairing
# Copyright (C) 2025  Rook Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from typing import List, Optional

from rookpairing.constants import RESULT_WIN
from rookpairing.controllers.score_ledger import ScoreLedger
from rookpairing.models import Match, Player, RoundData, Tournament
from rookpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class CascadeStep:
    """One match to settle; ``winner`` is None for a bye being voided."""

    match: Match
    winner: Optional[Player]


@dataclass
class EliminationPlan:
    loser: Player
    steps: List[CascadeStep] = field(default_factory=list)


class EliminationCascade:
    """Knocks cup losers out and settles their other matches in the round."""

    def __init__(self, ledger: ScoreLedger):
        self.ledger = ledger

    def plan(
        self,
        tournament: Tournament,
        round_data: RoundData,
        loser: Player,
        source: Match,
    ) -> EliminationPlan:
        """Work out what eliminating ``loser`` settles, without changing anything.

        Raises:
            PlayerNotFoundException: If an opponent in the round is unknown
        """
        plan = EliminationPlan(loser=loser)
        for match in round_data.matches_for(loser.id):
            if match.id == source.id or match.is_resolved:
                continue
            if match.is_bye:
                plan.steps.append(CascadeStep(match=match, winner=None))
            else:
                opponent = tournament.get_player(match.opponent_of(loser.id))
                plan.steps.append(CascadeStep(match=match, winner=opponent))
        return plan

    def apply(self, plan: EliminationPlan) -> List[Match]:
        """Eliminate the loser and settle the planned matches."""
        loser = plan.loser
        if not loser.eliminated:
            loser.eliminated = True
            logger.info(f"{loser.name} has been eliminated")

        settled = []
        for step in plan.steps:
            if step.winner is None:
                self.ledger.void_bye(step.match, loser)
            else:
                self.ledger.award_forfeit(step.match, step.winner, loser)
                logger.info(
                    f"{step.winner.name} wins board {step.match.board_number} "
                    f"by forfeit ({loser.name} eliminated)"
                )
            settled.append(step.match)
        return settled

    @staticmethod
    def has_lost_elsewhere(tournament: Tournament, player_id: str, source: Match) -> bool:
        """Whether ``player_id`` lost another match over the board.

        Forfeits are consequences of an elimination, not causes, so they are
        ignored.
        """
        return any(
            match.id != source.id
            and match.result == RESULT_WIN
            and match.loser_id == player_id
            for round_data in tournament.rounds
            for match in round_data.matches
        )

    def reinstate(self, tournament: Tournament, player: Player, source: Match) -> bool:
        """Bring a player back after the result that knocked them out was corrected.

        Forfeits already awarded against them stay as they are.

        Returns:
            True if the player was reinstated
        """
        if not player.eliminated or self.has_lost_elsewhere(tournament, player.id, source):
            return False
        player.eliminated = False
        logger.info(f"{player.name} reinstated after a result correction")
        return True
