from .type_distribution_view import TypeDistributionView
from .type_count_view import TypeCountView
from .stat_radar_view import StatRadarView, StatComparisonView
from .parallel_coordinates_view import ParallelCoordinatesView
from .total_histogram_view import TotalHistogramView

__all__ = [
    "TypeDistributionView",
    "TypeCountView",
    "StatRadarView",
    "StatComparisonView",
    "ParallelCoordinatesView",
    "TotalHistogramView",
]
