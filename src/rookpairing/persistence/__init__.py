from rookpairing.persistence.json_store import (
    JsonTournamentStore,
    TournamentStore,
    default_store_dir,
)

__all__ = ["JsonTournamentStore", "TournamentStore", "default_store_dir"]
