"""
Services Package

Contains the game engine and the session service built on it.
"""

from .game_engine import (
    GameEngine, GameError, InvalidGuessError,
    classify_letter, evaluate_guess, shares_letter_with_secret, upgrade_letter_status
)
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'GameEngine', 'GameError', 'InvalidGuessError',
    'classify_letter', 'evaluate_guess', 'shares_letter_with_secret', 'upgrade_letter_status',
    'GameService', 'get_game_service', 'initialize_game_service'
]
