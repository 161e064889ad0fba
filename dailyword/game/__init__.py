from .board import BoardState
from .config import MAX_ATTEMPTS, GameConfig
from .controls import InputController, Notification, notification_for
from .days import DEFAULT_EPOCH, DaySelector, day_index
from .session import GameSession, GameStatus, Guess, Outcome, Rejected, RejectReason, Scored

__all__ = [
    "BoardState", "GameConfig", "MAX_ATTEMPTS", "DaySelector", "day_index", "DEFAULT_EPOCH",
    "GameSession", "GameStatus", "Guess", "Outcome", "Rejected", "RejectReason", "Scored",
    "InputController", "Notification", "notification_for",
]
