"""Classic data structures and algorithms: containers, sorting, searching, trees and puzzles."""

__version__ = "0.1.0"