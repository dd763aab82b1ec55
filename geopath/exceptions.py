"""
Custom exceptions for geopath.

Provides a clear exception hierarchy for better error handling and debugging.
All exceptions inherit from GeoPathError for easy catching of all library errors.
"""


class GeoPathError(Exception):
    """Base exception for all geopath errors."""

    pass


# ==============================================================================
# Input/Parsing Errors
# ==============================================================================


class ParseError(GeoPathError):
    """Raised when parsing input data fails."""

    pass


class GeoJSONParseError(ParseError):
    """Raised specifically for GeoJSON parsing failures."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse GeoJSON from '{source}': {reason}")


class ValidationError(GeoPathError):
    """Raised when input validation fails."""

    pass


# ==============================================================================
# Graph Construction Errors
# ==============================================================================


class GraphError(GeoPathError):
    """Base class for graph-related errors."""

    pass


class GraphBuildError(GraphError):
    """Raised when graph construction or lookup fails."""

    def __init__(self, reason: str, num_nodes: int = 0, num_edges: int = 0):
        self.reason = reason
        self.num_nodes = num_nodes
        self.num_edges = num_edges
        msg = f"Graph construction failed: {reason}"
        if num_nodes or num_edges:
            msg += f" (nodes: {num_nodes}, edges: {num_edges})"
        super().__init__(msg)


class NodeNotFoundError(GraphError):
    """Raised when a query names a node ID the graph does not have."""

    def __init__(self, node_id: int, num_nodes: int):
        self.node_id = node_id
        self.num_nodes = num_nodes
        super().__init__(f"Node {node_id} is not in the graph (valid IDs: [0, {num_nodes}))")


# ==============================================================================
# Routing Errors
# ==============================================================================


class RoutingError(GeoPathError):
    """Base class for routing-related errors."""

    pass


class NoPathError(RoutingError):
    """Raised when no path exists between the query points."""

    def __init__(self, start, end, reason: str = ""):
        self.start = start
        self.end = end
        self.reason = reason
        msg = f"No path exists from {start} to {end}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


# ==============================================================================
# Configuration Errors
# ==============================================================================


class ConfigurationError(GeoPathError):
    """Raised when configuration is invalid."""

    pass


# ==============================================================================
# Convenience Functions
# ==============================================================================


def handle_parse_error(source: str, original_error: Exception) -> None:
    """
    Convert generic parsing errors to specific GeoJSONParseError.

    Args:
        source: Name of the document being parsed (file path or '<string>')
        original_error: The original exception that was raised

    Raises:
        GeoJSONParseError: Always raises with context from original error
    """
    import json

    if isinstance(original_error, json.JSONDecodeError):
        raise GeoJSONParseError(source, f"JSON syntax error: {original_error}") from original_error
    elif isinstance(original_error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        raise GeoJSONParseError(source, str(original_error)) from original_error
    else:
        raise GeoJSONParseError(source, f"Unexpected error: {type(original_error).__name__}: {original_error}") from original_error
