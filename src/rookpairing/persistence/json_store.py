"""Tournament storage as one JSON document per tournament."""

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

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

from rookpairing.constants import (
    DEFAULT_STORE_DIRNAME,
    SAVE_FILE_EXTENSION,
    STORE_DIR_ENV,
)
from rookpairing.exceptions import (
    FileLoadException,
    FileSaveException,
    TournamentNotFoundException,
    ValidationException,
)
from rookpairing.models import Tournament
from rookpairing.type_hints import Document, IdFactory
from rookpairing.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class TournamentStore(Protocol):
    """Whole-aggregate snapshot persistence used by hosts."""

    def load(self, tournament_id: str) -> Tournament: ...

    def save(self, tournament: Tournament) -> None: ...

    def delete(self, tournament_id: str) -> bool: ...

    def list(self) -> List[Tournament]: ...


def default_store_dir() -> Path:
    """Store directory from ``ROOK_PAIRING_HOME``, else ``~/.rookpairing``."""
    configured = os.environ.get(STORE_DIR_ENV)
    if configured:
        return Path(configured).expanduser()
    return Path.home() / DEFAULT_STORE_DIRNAME


class JsonTournamentStore:
    """Keeps each tournament in ``<directory>/<id>.json``.

    Documents are written to a temporary file in the same directory and
    renamed over the target, so a reader never sees a partial document.
    """

    def __init__(self, directory: Union[str, Path, None] = None):
        self.directory = Path(directory) if directory else default_store_dir()

    def _path(self, tournament_id: str) -> Path:
        if not tournament_id or os.sep in tournament_id or tournament_id.startswith("."):
            raise ValidationException(f"Invalid tournament id: {tournament_id!r}")
        return self.directory / f"{tournament_id}{SAVE_FILE_EXTENSION}"

    @staticmethod
    def _read_document(path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FileLoadException(f"Could not read {path}: {e}") from e

    def exists(self, tournament_id: str) -> bool:
        try:
            return self._path(tournament_id).exists()
        except ValidationException:
            return False

    def load(self, tournament_id: str) -> Tournament:
        """Load a tournament by id.

        Raises:
            TournamentNotFoundException: If no document exists for the id
            FileLoadException: If the document cannot be read or parsed
            ValidationException: If the document is not a valid tournament
        """
        path = self._path(tournament_id)
        if not path.exists():
            raise TournamentNotFoundException(f"Tournament not found: {tournament_id}")
        return Tournament.from_dict(self._read_document(path))

    def save(self, tournament: Tournament) -> None:
        """Write the whole tournament, replacing any earlier snapshot.

        Raises:
            FileSaveException: If the document cannot be written
        """
        path = self._path(tournament.id)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{tournament.id}.", suffix=".tmp", dir=self.directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(tournament.to_dict(), f, indent=4)
                os.replace(temp_name, path)
            except BaseException:
                if os.path.exists(temp_name):
                    os.unlink(temp_name)
                raise
        except OSError as e:
            raise FileSaveException(f"Could not save tournament to {path}: {e}") from e
        logger.debug("Saved tournament %s to %s", tournament.name, path)

    def delete(self, tournament_id: str) -> bool:
        """Remove a stored tournament. Returns False if there was none."""
        path = self._path(tournament_id)
        if not path.exists():
            return False
        path.unlink()
        logger.info("Deleted tournament %s", tournament_id)
        return True

    def list(self) -> List[Tournament]:
        """All readable tournaments, most recently updated first.

        Unreadable documents are logged and skipped.
        """
        if not self.directory.is_dir():
            return []
        tournaments = []
        for path in sorted(self.directory.glob(f"*{SAVE_FILE_EXTENSION}")):
            try:
                tournaments.append(Tournament.from_dict(self._read_document(path)))
            except (FileLoadException, ValidationException) as e:
                logger.warning("Skipping %s: %s", path.name, e)
        tournaments.sort(key=lambda t: t.updated_at, reverse=True)
        return tournaments

    def import_document(
        self,
        document: Document,
        id_factory: IdFactory = generate_id,
    ) -> Tournament:
        """Store an exported tournament document.

        An id that is already in use is replaced by a fresh one.

        Raises:
            ValidationException: If the document is not a valid tournament
        """
        tournament = Tournament.from_dict(document)
        if self.exists(tournament.id):
            old_id, tournament.id = tournament.id, id_factory()
            logger.info(
                "Tournament id %s already exists; imported as %s", old_id, tournament.id
            )
        self.save(tournament)
        return tournament

    def import_file(self, path: Union[str, Path], id_factory: Optional[IdFactory] = None) -> Tournament:
        """Read a JSON export from disk and store it. See ``import_document``."""
        document = self._read_document(Path(path))
        if not isinstance(document, dict):
            raise ValidationException(f"{path} does not contain a tournament document")
        return self.import_document(document, id_factory or generate_id)
