class GameError(Exception):
    pass


class InvalidArgumentError(GameError, ValueError):
    pass


class InvalidMoveError(InvalidArgumentError):
    """Placement rejected by the board: out of bounds or occupied cell."""


class LogicError(GameError):
    pass
