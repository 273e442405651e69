"""Shortest-path metrics over an exploration graph."""

import networkx as nx

from .geometry import Point


class PathAnalysisError(Exception):
    """Raised when a metric is requested for a vertex outside the graph."""

    pass


def distance(graph: nx.Graph, source: Point, target: Point) -> int:
    """
    Number of edges on a shortest path between two vertices.

    Raises:
        PathAnalysisError: If either vertex is missing or they are not connected.
    """
    try:
        return nx.shortest_path_length(graph, source=source, target=target)
    except nx.NodeNotFound as e:
        raise PathAnalysisError(str(e)) from e
    except nx.NetworkXNoPath as e:
        raise PathAnalysisError(f"No path from {source} to {target}") from e


def eccentricity(graph: nx.Graph, source: Point) -> int:
    """
    Greatest shortest-path distance from source to any other vertex.

    A single-vertex graph has eccentricity 0.

    Raises:
        PathAnalysisError: If source is not in the graph.
    """
    if source not in graph:
        raise PathAnalysisError(f"Source {source} is not in the graph")
    lengths = nx.single_source_shortest_path_length(graph, source)
    return max(lengths.values(), default=0)
