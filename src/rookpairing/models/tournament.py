"""Tournament aggregate - the roster, the rounds and the lifecycle state.

Every core operation receives the aggregate explicitly. Roster management
lives here; pairing, scoring and lifecycle transitions live in
``rookpairing.controllers``.
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

from datetime import datetime
from typing import Any, Dict, List, Optional

from rookpairing.constants import (
    MODE_CUP,
    MODE_ROUND_ROBIN,
    STATUS_COMPLETED,
    STATUS_ONGOING,
    STATUS_PENDING,
    TOURNAMENT_STATUSES,
)
from rookpairing.exceptions import (
    PlayerNotFoundException,
    TeamNotFoundException,
    TournamentStateException,
    ValidationException,
)
from rookpairing.models.player import Player
from rookpairing.models.round_data import RoundData
from rookpairing.models.standings import StandingsEntry
from rookpairing.models.team import Team
from rookpairing.models.tournament_config import TournamentConfig
from rookpairing.type_hints import Mode, Seating, Status
from rookpairing.utils import generate_id, parse_iso, setup_logger, to_iso, utc_now
from rookpairing.utils.validation import (
    ensure_unique_name,
    validate_name_strict,
    validate_rating_strict,
)

logger = setup_logger(__name__)

# Marks an edit_player argument the caller left untouched
UNCHANGED: Any = object()


class Tournament:
    """Main tournament aggregate.

    Attributes:
        id: Unique identifier
        config: Name, mode, round limit, team flag and time control
        status: "pending", "ongoing" or "completed"
        players: Players keyed by id, in the order they were added
        teams: Teams keyed by id (team tournaments only)
        rounds: Append-only list of rounds
        rr_seating: Persistent round-robin seating, None until the first
            round-robin round; a None seat is the bye placeholder
        leaderboard: Standings frozen when the tournament ends
    """

    def __init__(
        self,
        config: TournamentConfig,
        tournament_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> None:
        self.id: str = tournament_id or generate_id()
        self.config = config
        self.status: Status = STATUS_PENDING

        self.players: Dict[str, Player] = {}
        self.teams: Dict[str, Team] = {}
        self.rounds: List[RoundData] = []
        self.rr_seating: Optional[Seating] = None
        self.leaderboard: List[StandingsEntry] = []

        self.created_at: datetime = created_at or utc_now()
        self.updated_at: datetime = self.created_at
        self.completed_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        name: str,
        mode: Mode,
        num_rounds: Optional[int] = None,
        is_team_tournament: bool = False,
        time_control: Optional[str] = None,
        tournament_id: Optional[str] = None,
    ) -> "Tournament":
        """Validate the settings and build a pending tournament.

        Raises:
            ValidationException: If name, mode or round limit are invalid
        """
        config = TournamentConfig(
            name=name,
            mode=mode,
            num_rounds=num_rounds,
            is_team_tournament=is_team_tournament,
            time_control=time_control,
        )
        tournament = cls(config, tournament_id=tournament_id)
        logger.info(
            "Created tournament: %s (%s, %s)",
            tournament.name,
            tournament.mode,
            tournament.id,
        )
        return tournament

    # ========== Properties ==========

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def mode(self) -> str:
        return self.config.mode

    @property
    def num_rounds(self) -> Optional[int]:
        return self.config.num_rounds

    @property
    def is_team_tournament(self) -> bool:
        return self.config.is_team_tournament

    @property
    def is_cup(self) -> bool:
        return self.config.mode == MODE_CUP

    @property
    def is_round_robin(self) -> bool:
        return self.config.mode == MODE_ROUND_ROBIN

    @property
    def is_pending(self) -> bool:
        return self.status == STATUS_PENDING

    @property
    def is_ongoing(self) -> bool:
        return self.status == STATUS_ONGOING

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED

    @property
    def current_round(self) -> Optional[RoundData]:
        """The most recent round, or None before round 1."""
        return self.rounds[-1] if self.rounds else None

    def touch(self) -> None:
        """Stamp the last-updated time."""
        self.updated_at = utc_now()

    # ========== Lookups ==========

    def get_player(self, player_id: Optional[str]) -> Player:
        """Look up a player by id.

        Raises:
            PlayerNotFoundException: If no such player exists
        """
        player = self.players.get(player_id) if player_id else None
        if player is None:
            raise PlayerNotFoundException(f"Player not found: {player_id}")
        return player

    def get_team(self, team_id: Optional[str]) -> Team:
        """Look up a team by id.

        Raises:
            TeamNotFoundException: If no such team exists
        """
        team = self.teams.get(team_id) if team_id else None
        if team is None:
            raise TeamNotFoundException(f"Team not found: {team_id}")
        return team

    def get_player_list(self, active_only: bool = False) -> List[Player]:
        """Get list of tournament players.

        Args:
            active_only: If True, leave out eliminated players
        """
        players = list(self.players.values())
        if active_only:
            return [p for p in players if p.is_active]
        return players

    def team_name(self, team_id: Optional[str]) -> Optional[str]:
        team = self.teams.get(team_id) if team_id else None
        return team.name if team else None

    def share_team(self, player1: Player, player2: Player) -> bool:
        """Whether two players are teammates in a team tournament."""
        return (
            self.is_team_tournament
            and player1.team_id is not None
            and player1.team_id == player2.team_id
        )

    def player_has_matches(self, player_id: str) -> bool:
        return any(r.matches_for(player_id) for r in self.rounds)

    def bye_count(self, player_id: str) -> int:
        """Number of rounds in which the player was scheduled a bye."""
        return sum(
            1
            for round_data in self.rounds
            if any(m.is_bye and m.player1_id == player_id for m in round_data.matches)
        )

    # ========== Team Management ==========

    def _check_roster_editable(self) -> None:
        if self.is_completed:
            raise TournamentStateException(
                "The roster cannot change once the tournament is completed"
            )

    def _check_team_mode(self) -> None:
        if not self.is_team_tournament:
            raise ValidationException(f"{self.name} is not a team tournament")

    def add_team(self, name: str, team_id: Optional[str] = None) -> Team:
        """Add a team to a team tournament.

        Raises:
            TournamentStateException: If the tournament is completed
            ValidationException: If the name is empty, taken, or teams are not in use
        """
        self._check_roster_editable()
        self._check_team_mode()
        team_name = validate_name_strict(name, label="Team name")
        ensure_unique_name(
            team_name, (t.name for t in self.teams.values()), label="A team"
        )

        team = Team(name=team_name, id=team_id or generate_id())
        self.teams[team.id] = team
        self.touch()
        logger.info("Added team: %s (%s)", team.name, team.id)
        return team

    def rename_team(self, team_id: str, name: str) -> Team:
        """Rename a team, keeping names unique."""
        self._check_roster_editable()
        team = self.get_team(team_id)
        team_name = validate_name_strict(name, label="Team name")
        ensure_unique_name(
            team_name,
            (t.name for t in self.teams.values() if t.id != team_id),
            label="A team",
        )

        old_name, team.name = team.name, team_name
        self.touch()
        logger.info("Renamed team %s to %s", old_name, team_name)
        return team

    def remove_team(self, team_id: str) -> Team:
        """Remove a team nobody plays for.

        Raises:
            ValidationException: If any player still references the team
        """
        self._check_roster_editable()
        team = self.get_team(team_id)
        members = [p for p in self.players.values() if p.team_id == team_id]
        if members:
            raise ValidationException(
                f'Cannot delete team "{team.name}". It has {len(members)} '
                "player(s) assigned. Reassign or delete them first."
            )

        del self.teams[team_id]
        self.touch()
        logger.info("Removed team: %s (%s)", team.name, team_id)
        return team

    # ========== Player Management ==========

    def _resolve_team_id(self, team_id: Optional[str]) -> Optional[str]:
        if not team_id:
            return None
        self._check_team_mode()
        return self.get_team(team_id).id

    def add_player(
        self,
        name: str,
        rating: Optional[int] = None,
        team_id: Optional[str] = None,
        player_id: Optional[str] = None,
    ) -> Player:
        """Add a player to the tournament.

        Raises:
            TournamentStateException: If the tournament is completed
            ValidationException: If name or rating are invalid or the name is taken
            TeamNotFoundException: If ``team_id`` names no team
        """
        self._check_roster_editable()
        player_name = validate_name_strict(name, label="Player name")
        ensure_unique_name(player_name, (p.name for p in self.players.values()))
        player_rating = validate_rating_strict(rating)
        resolved_team = self._resolve_team_id(team_id)

        player = Player(
            name=player_name,
            rating=player_rating,
            team_id=resolved_team,
            player_id=player_id,
        )
        if player.id in self.players:
            raise ValidationException(f"Duplicate player id: {player.id}")
        self.players[player.id] = player
        self.touch()

        if self.is_round_robin and self.rr_seating is not None:
            logger.warning(
                "%s joined after the round-robin schedule was fixed and will not be paired",
                player.name,
            )
        logger.info("Added player: %s (%s)", player.name, player.id)
        return player

    def edit_player(
        self,
        player_id: str,
        name: Any = UNCHANGED,
        rating: Any = UNCHANGED,
        team_id: Any = UNCHANGED,
    ) -> Player:
        """Change a player's name, rating or team. Omitted fields are kept."""
        self._check_roster_editable()
        player = self.get_player(player_id)

        new_name = player.name
        if name is not UNCHANGED:
            new_name = validate_name_strict(name, label="Player name")
            ensure_unique_name(
                new_name,
                (p.name for p in self.players.values() if p.id != player_id),
            )
        new_rating = player.rating
        if rating is not UNCHANGED:
            new_rating = validate_rating_strict(rating)
        new_team = player.team_id
        if team_id is not UNCHANGED:
            new_team = self._resolve_team_id(team_id)

        player.name, player.rating, player.team_id = new_name, new_rating, new_team
        self.touch()
        logger.info("Updated player: %s (%s)", player.name, player.id)
        return player

    def remove_player(self, player_id: str) -> Player:
        """Remove a player who has not been paired in any round.

        Raises:
            ValidationException: If the player appears in any match
        """
        self._check_roster_editable()
        player = self.get_player(player_id)
        if self.player_has_matches(player_id):
            raise ValidationException(
                f"Cannot delete {player.name}: they have already been paired in a round"
            )

        del self.players[player_id]
        self.touch()
        logger.info("Removed player: %s (%s)", player.name, player_id)
        return player

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to a self-contained dictionary.

        Date-valued fields become ISO-8601 strings.
        """
        return {
            "id": self.id,
            "config": self.config.to_dict(),
            "status": self.status,
            "players": [p.to_dict() for p in self.players.values()],
            "teams": [t.to_dict() for t in self.teams.values()],
            "rounds": [r.to_dict() for r in self.rounds],
            "rr_seating": list(self.rr_seating) if self.rr_seating is not None else None,
            "leaderboard": [entry.to_dict() for entry in self.leaderboard],
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
            "completed_at": to_iso(self.completed_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Config may be nested under ``config`` or stored flat. Optional
        collections default to empty.

        Raises:
            ValidationException: If a required field is missing or malformed
        """
        config_data = data.get("config", data)
        missing = [
            key
            for key, present in (
                ("id", bool(data.get("id"))),
                ("name", bool(config_data.get("name"))),
                ("mode", bool(config_data.get("mode"))),
                ("players", isinstance(data.get("players"), list)),
                ("rounds", isinstance(data.get("rounds"), list)),
            )
            if not present
        ]
        if missing:
            raise ValidationException(
                f"Invalid tournament data. Missing required fields: {', '.join(missing)}"
            )

        status = data.get("status", STATUS_PENDING)
        if status not in TOURNAMENT_STATUSES:
            raise ValidationException(f"Unknown tournament status: {status!r}")

        try:
            tournament = cls(
                TournamentConfig.from_dict(config_data),
                tournament_id=data["id"],
                created_at=parse_iso(data.get("created_at")),
            )
            tournament.status = status

            for team_data in data.get("teams") or []:
                team = Team.from_dict(team_data)
                tournament.teams[team.id] = team
            for player_data in data["players"]:
                player = Player.from_dict(player_data)
                tournament.players[player.id] = player
            tournament.rounds = [RoundData.from_dict(r) for r in data["rounds"]]

            seating = data.get("rr_seating")
            tournament.rr_seating = list(seating) if seating is not None else None
            tournament.leaderboard = [
                StandingsEntry.from_dict(entry) for entry in data.get("leaderboard") or []
            ]
            tournament.updated_at = (
                parse_iso(data.get("updated_at")) or tournament.created_at
            )
            tournament.completed_at = parse_iso(data.get("completed_at"))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ValidationException(f"Invalid tournament data: {e}") from e

        logger.info("Loaded tournament: %s", tournament.name)
        return tournament

    def __repr__(self) -> str:
        return (
            f"Tournament(name='{self.name}', mode='{self.mode}', "
            f"status='{self.status}', id='{self.id}')"
        )
