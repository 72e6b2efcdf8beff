"""Protocol definitions for extensible components."""

from chunkhunter.protocols.ingester import Ingester
from chunkhunter.protocols.matcher import MatchingStrategy

__all__ = ["Ingester", "MatchingStrategy"]
