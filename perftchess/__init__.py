"""Chess move generation and perft node counting from FEN positions."""

__version__ = "0.1.0"

__all__ = ["board", "cli", "moves", "perft", "pieces", "tools"]