"""
Conversion table loading.
"""
from .csv_loader import (
    default_graphs_folder,
    graph_names_from_folder,
    load_folder,
    load_graph,
    load_records,
)

__all__ = [
    "default_graphs_folder",
    "graph_names_from_folder",
    "load_folder",
    "load_graph",
    "load_records",
]
