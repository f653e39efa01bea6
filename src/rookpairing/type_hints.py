"""Type hints used in Rook Pairing."""

from typing import Callable, Dict, List, Literal, Optional

# Tournament format
Mode = Literal["swiss", "round-robin", "cup"]

# Lifecycle state
Status = Literal["pending", "ongoing", "completed"]

# Ordering used to build a Swiss round
PairingType = Literal["random", "points", "auto"]

# Value stored in Match.result once resolved
ResultType = Literal["win", "draw", "bye-win", "forfeit-win", "eliminated-bye"]

# Player identifiers; None marks the missing side of a bye
PlayerId = str
MaybePlayerId = Optional[PlayerId]

# Round-robin seating; None is the bye placeholder seat
Seating = List[MaybePlayerId]

# Called after every mutating operation on a tournament
ChangeListener = Callable[["Tournament"], None]

# Factory producing fresh entity identifiers
IdFactory = Callable[[], str]

# Serialized aggregate
Document = Dict[str, object]

#  LocalWords:  MaybePlayerId
