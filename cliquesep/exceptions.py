"""Exceptions raised by cliquesep."""


class CliqueSepError(Exception):
    """Base exception for cliquesep errors."""


class InvalidGraphError(CliqueSepError, ValueError):
    """The supplied graph cannot be treated as a simple undirected graph."""


class SeparatorInvariantError(CliqueSepError, RuntimeError):
    """A clique separator failed to disconnect the working graph.

    This signals a defect in the triangulation or generator computation,
    not a problem with the input graph.
    """
