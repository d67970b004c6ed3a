"""Element-to-cluster assignment."""

from .nearest import (
    nearest_cluster_index, nearest_cluster, assign_element, assign_elements
)

__all__ = [
    'nearest_cluster_index',
    'nearest_cluster',
    'assign_element',
    'assign_elements'
]
