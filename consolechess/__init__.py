"""Terminal chess pieces: board, move rules, moves with undo, players, a console view and game saving."""

__version__ = "1.0.0"