"""
Домен подбора электромобилей.
Логика матчинга групп с автопарком.
"""

from evpool.core.matching.service import MatchingService

__all__ = [
    "MatchingService",
]
