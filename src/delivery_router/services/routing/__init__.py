"""Route sequencing engine exports."""

from .engine import default_start_position, optimize_route, plan_route, summarize_route

__all__ = ["optimize_route", "plan_route", "summarize_route", "default_start_position"]
