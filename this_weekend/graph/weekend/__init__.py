"""Weekend plan graph."""

from this_weekend.graph.weekend.workflow import compiled_weekend_graph

__all__ = ["compiled_weekend_graph"]
