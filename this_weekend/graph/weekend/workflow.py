"""Weekend plan graph workflow."""

from langgraph.graph import END, StateGraph

from this_weekend.core.errors import PlanErrorKind
from this_weekend.graph.weekend.nodes import apply_fallback, build_request, call_generator, validate_response
from this_weekend.graph.weekend.state import WeekendPlanState


def _route_on_error(next_node: str):
    """Continue to `next_node`, or divert to the fallback (or stop) after a failure."""

    def _route(state: WeekendPlanState) -> str:
        if not state.get("error_kind"):
            return next_node
        if state.get("allow_fallback") and state.get("error_kind") != PlanErrorKind.INPUT_INVALID:
            return "apply_fallback"
        return END

    return _route


def _create_weekend_workflow() -> StateGraph:
    """Build the weekend plan workflow."""
    workflow = StateGraph(WeekendPlanState)

    workflow.add_node("build_request", build_request)
    workflow.add_node("call_generator", call_generator)
    workflow.add_node("validate_response", validate_response)
    workflow.add_node("apply_fallback", apply_fallback)

    workflow.set_entry_point("build_request")
    workflow.add_conditional_edges(
        "build_request", _route_on_error("call_generator"), ["call_generator", "apply_fallback", END]
    )
    workflow.add_conditional_edges(
        "call_generator", _route_on_error("validate_response"), ["validate_response", "apply_fallback", END]
    )
    workflow.add_conditional_edges("validate_response", _route_on_error(END), ["apply_fallback", END])
    workflow.add_edge("apply_fallback", END)

    return workflow


compiled_weekend_graph = _create_weekend_workflow().compile()
