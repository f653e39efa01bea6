"""Rook Pairing: Swiss, Round Robin and Cup tournament manager."""

from rookpairing.constants import APP_VERSION

__version__ = APP_VERSION
