from backend.models.board import GOAL, SIZE, Board, Direction, InvalidBoardError

__all__ = ["GOAL", "SIZE", "Board", "Direction", "InvalidBoardError"]
