"""Service orchestrators and resource store components."""

from .cascade_deletion import CascadeDeletionEngine, CascadeReport
from .favorites_index import Favorites, FavoritesIndex
from .hierarchy_service import HierarchyService
from .node_repository import NodeRepository
from .rating_aggregator import RatingAggregator
from .reference_maintainer import ReferenceMaintainer
from .review_service import ReviewService

__all__ = [
    "CascadeDeletionEngine",
    "CascadeReport",
    "Favorites",
    "FavoritesIndex",
    "HierarchyService",
    "NodeRepository",
    "RatingAggregator",
    "ReferenceMaintainer",
    "ReviewService",
]
