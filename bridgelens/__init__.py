"""bridgelens - cross-chain bridge transaction inspection and route advice."""

from bridgelens.analysis.comparator import RouteComparator
from bridgelens.models.comparison import RouteComparison

__version__ = "0.1.0"
__all__ = ["RouteComparator", "RouteComparison", "__version__"]
