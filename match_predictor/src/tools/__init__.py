from match_predictor.src.tools.match_context import fetch_match_context

__all__ = ["fetch_match_context"]
