# -----------------------------------------------------------------------------
# Error taxonomy
# Purpose: Fatal, caller-facing failures raised by the validator and engines.
# Each error carries a short 'kind' tag so the API layer can report it
# without string matching.
# -----------------------------------------------------------------------------

from __future__ import annotations


class TraceError(Exception):
    kind = "trace_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# Structurally malformed graph (missing arrays, empty node set, bad edge fields)
class InvalidGraph(TraceError): kind = "InvalidGraph"

# Prim: no node to grow the tree from
class InvalidStart(TraceError): kind = "InvalidStart"

# Dijkstra parameter errors
class MissingSource(TraceError): kind = "MissingSource"
class UnknownSource(TraceError): kind = "UnknownSource"
class UnknownTarget(TraceError): kind = "UnknownTarget"

# Router: no engine registered under the requested name
class UnknownAlgorithm(TraceError): kind = "UnknownAlgorithm"
