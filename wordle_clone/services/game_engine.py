"""
Game Engine

Contains the rules of a single game: guess validation, per-letter
feedback, keyboard status aggregation and win/loss transitions.
"""

from typing import Dict, List, Optional, Tuple
from ..models.game import GameState, GameStatus, LetterStatus
from ..config.game_settings import ALPHABET, WORD_LENGTH, MAX_GUESSES

INVALID_GUESS_MESSAGE = "Your guess must contain at least one correct letter!"


class GameError(Exception):
    """Base class for errors raised by the game engine."""


class InvalidGuessError(GameError):
    """
    A full-length guess was refused because it shares no letter with the secret.

    The game state is untouched; the player may edit the attempt and resubmit.
    """

    def __init__(self, guess: str, message: str = INVALID_GUESS_MESSAGE):
        super().__init__(message)
        self.guess = guess
        self.message = message


def classify_letter(secret: str, index: int, letter: str) -> LetterStatus:
    """Classifies the letter guessed at ``index`` against the secret."""
    if secret[index] == letter:
        return LetterStatus.CORRECT
    if letter in secret:
        return LetterStatus.PRESENT
    return LetterStatus.ABSENT


def upgrade_letter_status(current: LetterStatus, new: LetterStatus) -> LetterStatus:
    """Keyboard status only moves up: CORRECT > PRESENT > ABSENT > UNUSED."""
    return new if new.priority > current.priority else current


def evaluate_guess(secret: str, guess: str) -> List[Tuple[str, LetterStatus]]:
    """
    Per-position feedback for a guess.

    Positions are classified independently, so a repeated guess letter can be
    marked PRESENT even when the secret's only occurrence of it is already
    matched elsewhere in the same guess.
    """
    return [(letter, classify_letter(secret, i, letter)) for i, letter in enumerate(guess)]


def shares_letter_with_secret(secret: str, guess: str) -> bool:
    """True if any guessed letter matches its position or appears in the secret."""
    return any(secret[i] == letter or letter in secret for i, letter in enumerate(guess))


class GameEngine:
    """
    One game: a fixed secret, ordered guess slots, keyboard status and the
    attempt being typed.

    Every mutating method returns a fresh GameState snapshot. Calls that
    violate a precondition (game over, attempt full or empty, wrong length)
    change nothing.
    """

    def __init__(self, secret: str, word_length: int = WORD_LENGTH,
                 max_guesses: int = MAX_GUESSES, game_id: Optional[str] = None):
        secret = secret.strip().upper()
        if len(secret) != word_length:
            raise ValueError(f"Secret must be exactly {word_length} letters")
        if not all(char in ALPHABET for char in secret):
            raise ValueError("Secret must use only the letters A-Z")
        if max_guesses < 1:
            raise ValueError("A game needs at least one guess slot")

        self.game_id = game_id
        self.word_length = word_length
        self.max_guesses = max_guesses
        self._secret = secret
        self._guesses: List[str] = [""] * max_guesses
        self._letter_status: Dict[str, LetterStatus] = {
            letter: LetterStatus.UNUSED for letter in ALPHABET
        }
        self._current_attempt = ""
        self._status = GameStatus.ONGOING

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def current_attempt(self) -> str:
        return self._current_attempt

    def current_status(self) -> GameStatus:
        return self._status

    def is_over(self) -> bool:
        return self._status is not GameStatus.ONGOING

    def _next_empty_slot(self) -> Optional[int]:
        for i, guess in enumerate(self._guesses):
            if not guess:
                return i
        return None

    def append_letter(self, letter: str) -> GameState:
        """Adds a letter to the attempt being typed."""
        if self.is_over() or len(self._current_attempt) >= self.word_length:
            return self.get_state()

        if not isinstance(letter, str) or len(letter) != 1:
            return self.get_state()
        letter = letter.upper()
        if letter not in ALPHABET:
            return self.get_state()

        self._current_attempt += letter
        return self.get_state()

    def delete_letter(self) -> GameState:
        """Removes the last typed letter."""
        if not self.is_over() and self._current_attempt:
            self._current_attempt = self._current_attempt[:-1]
        return self.get_state()

    def submit_guess(self) -> GameState:
        """
        Commits the typed attempt to the next empty slot.

        Raises:
            InvalidGuessError: the attempt shares no letter with the secret;
                the attempt and slots are left unchanged
        """
        if self.is_over() or len(self._current_attempt) != self.word_length:
            return self.get_state()

        guess = self._current_attempt
        if not shares_letter_with_secret(self._secret, guess):
            raise InvalidGuessError(guess)

        slot = self._next_empty_slot()
        self._guesses[slot] = guess

        for letter, status in evaluate_guess(self._secret, guess):
            self._letter_status[letter] = upgrade_letter_status(self._letter_status[letter], status)

        if guess == self._secret:
            self._status = GameStatus.WON
        elif slot == self.max_guesses - 1:
            self._status = GameStatus.LOST

        self._current_attempt = ""
        return self.get_state()

    def get_state(self) -> GameState:
        """Returns a snapshot; the answer is only revealed once the game is over."""
        guess_results = [
            [(letter, status.value) for letter, status in evaluate_guess(self._secret, guess)]
            for guess in self._guesses if guess
        ]

        return GameState(
            game_id=self.game_id,
            word_length=self.word_length,
            max_guesses=self.max_guesses,
            guesses=self._guesses.copy(),
            guess_results=guess_results,
            current_attempt=self._current_attempt,
            active_row=self._next_empty_slot(),
            letter_status={letter: status.value for letter, status in self._letter_status.items()},
            status=self._status.value,
            game_over=self.is_over(),
            won=self._status is GameStatus.WON,
            answer=self._secret if self.is_over() else None
        )
