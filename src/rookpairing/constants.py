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

# --- Constants ---
APP_NAME = "Rook Pairing"
APP_VERSION = "0.1.0"
SAVE_FILE_EXTENSION = ".json"

# Environment variable overriding where the CLI keeps its tournaments
STORE_DIR_ENV = "ROOK_PAIRING_HOME"
DEFAULT_STORE_DIRNAME = ".rookpairing"

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
BYE_SCORE = WIN_SCORE

# Tournament modes
MODE_SWISS = "swiss"
MODE_ROUND_ROBIN = "round-robin"
MODE_CUP = "cup"
TOURNAMENT_MODES = (MODE_SWISS, MODE_ROUND_ROBIN, MODE_CUP)

# Tournament lifecycle
STATUS_PENDING = "pending"
STATUS_ONGOING = "ongoing"
STATUS_COMPLETED = "completed"
TOURNAMENT_STATUSES = (STATUS_PENDING, STATUS_ONGOING, STATUS_COMPLETED)

# Swiss pairing orderings
PAIRING_RANDOM = "random"
PAIRING_POINTS = "points"
PAIRING_AUTO = "auto"
SWISS_PAIRING_TYPES = (PAIRING_RANDOM, PAIRING_POINTS, PAIRING_AUTO)

# Match result values
RESULT_WIN = "win"
RESULT_DRAW = "draw"
RESULT_BYE_WIN = "bye-win"
RESULT_FORFEIT_WIN = "forfeit-win"
RESULT_ELIMINATED_BYE = "eliminated-bye"
MATCH_RESULTS = (
    RESULT_WIN,
    RESULT_DRAW,
    RESULT_BYE_WIN,
    RESULT_FORFEIT_WIN,
    RESULT_ELIMINATED_BYE,
)
# Results that award a win to ``winner_id``
DECISIVE_RESULTS = (RESULT_WIN, RESULT_BYE_WIN, RESULT_FORFEIT_WIN)

# Round-robin seating placeholder for odd player counts (stored as null)
ROUND_ROBIN_BYE_SEAT = None

# Participant limits
MIN_PLAYERS_TO_START = 2
MIN_TEAMS_TO_START = 2
MIN_RATING = 0
MAX_RATING = 4000
MAX_NAME_LENGTH = 100

DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"
