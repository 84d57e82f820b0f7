"""Neighborhood structures."""

from .neighborhood import Neighbor, Neighborhood, merge_neighborhoods

__all__ = [
    "Neighbor",
    "Neighborhood",
    "merge_neighborhoods",
]
