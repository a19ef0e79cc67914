from backend.engine.gamestate.state import SearchStats, SearchStatus

__all__ = ["SearchStats", "SearchStatus"]
