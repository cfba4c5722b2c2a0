"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GameStatus, LetterStatus

__all__ = ['GameState', 'GameStatus', 'LetterStatus']
