"""
Game Service

Owns one GameEngine per game session and routes key events to it.
"""

import random
import threading
import uuid
from typing import Dict, List, Optional
from .game_engine import GameEngine
from ..models.game import GameState
from ..config.game_settings import ALPHABET, WORD_LIST, WORD_LENGTH, MAX_GUESSES, validate_word_list
from ..utils.helpers import normalize_key, ENTER, BACKSPACE
from ..utils.game_logger import game_logger


class GameService:
    """
    Game session registry.

    This class handles:
    - Game session management with unique game IDs
    - Secret selection from the word list
    - Mapping of key events onto engine operations
    - Starting a brand-new game in place of a finished one
    """

    def __init__(self, word_list: Optional[List[str]] = None,
                 word_length: int = WORD_LENGTH, max_guesses: int = MAX_GUESSES):
        word_list = [word.upper() for word in (word_list if word_list is not None else WORD_LIST)]
        validate_word_list(word_list, word_length)

        self.word_list = word_list
        self.word_length = word_length
        self.max_guesses = max_guesses
        self.games: Dict[str, GameEngine] = {}  # Store active games by game_id
        self._lock = threading.Lock()

    def _new_engine(self, game_id: str, secret: Optional[str] = None) -> GameEngine:
        # Select random word (server keeps this secret)
        secret = secret or random.choice(self.word_list)
        return GameEngine(secret, word_length=self.word_length,
                          max_guesses=self.max_guesses, game_id=game_id)

    def create_new_game(self, secret: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            secret: Word to guess; drawn from the word list when omitted

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        engine = self._new_engine(game_id, secret)

        with self._lock:
            self.games[game_id] = engine

        game_logger.logger.info(f"Game {game_id} created")
        return game_id

    def get_engine(self, game_id: str) -> Optional[GameEngine]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Returns:
            GameState object or None if game not found
        """
        engine = self.get_engine(game_id)
        if engine is None:
            return None
        with self._lock:
            return engine.get_state()

    def press_key(self, game_id: str, key: str) -> Optional[GameState]:
        """
        Applies one key event to a game.

        'ENTER' submits, 'BACKSPACE' deletes, a letter is appended and any
        other key is ignored.

        Returns:
            Updated GameState or None if game not found

        Raises:
            InvalidGuessError: the submitted attempt was rejected
        """
        engine = self.get_engine(game_id)
        if engine is None:
            return None

        normalized = normalize_key(key)
        with self._lock:
            if normalized == ENTER:
                return engine.submit_guess()
            if normalized == BACKSPACE:
                return engine.delete_letter()
            if normalized is not None:
                return engine.append_letter(normalized)
            return engine.get_state()

    def submit_word(self, game_id: str, word: str) -> Optional[GameState]:
        """
        Types a whole word into the attempt and submits it.

        A word that is not exactly word_length letters A-Z changes nothing,
        the same as pressing Enter on an incomplete attempt. Otherwise the
        attempt is cleared and retyped through the keyboard operations and
        submitted.

        Raises:
            InvalidGuessError: the submitted attempt was rejected
        """
        engine = self.get_engine(game_id)
        if engine is None:
            return None

        word = word.strip().upper() if isinstance(word, str) else ""

        with self._lock:
            if engine.is_over():
                return engine.get_state()
            if len(word) != engine.word_length or not all(char in ALPHABET for char in word):
                return engine.get_state()

            while engine.current_attempt:
                engine.delete_letter()
            for letter in word:
                engine.append_letter(letter)
            return engine.submit_guess()

    def restart_game(self, game_id: str, secret: Optional[str] = None) -> Optional[GameState]:
        """Replaces a session's game with a fresh one under the same ID."""
        engine = self._new_engine(game_id, secret)
        with self._lock:
            if game_id not in self.games:
                return None
            self.games[game_id] = engine
            return engine.get_state()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(**kwargs)
    return _game_service
