"""
Game Rules Module

Defines the fixed rules of the puzzle: word length, number of guess slots,
the on-screen keyboard layout and the word list secrets are drawn from.
"""

import json
import os
from typing import Dict, Final, Iterable, List, Optional

WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret and every submitted guess."""

MAX_GUESSES: Final[int] = 6
"""Number of guess slots in a game."""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# On-screen keyboard rows, ENTER and BACKSPACE share the bottom row
KEYBOARD_ROWS: Final[List[List[str]]] = [
    list("QWERTYUIOP"),
    list("ASDFGHJKL"),
    ["ENTER", *"ZXCVBNM", "BACKSPACE"],
]


def validate_word_list(words: Iterable[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates a candidate secret list.

    Every word must be exactly ``word_length`` uppercase letters A-Z and the
    list must not be empty.

    Raises:
        ValueError: naming the first offending word
    """
    words = list(words)
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")
        if not all(char in ALPHABET for char in word):
            raise ValueError(f"Word at index {index} '{word}' must use only the letters A-Z")

    return True


def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    uppercase_words = [word.upper() for word in word_list]
    validate_word_list(uppercase_words)
    return uppercase_words


# Curated word database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def get_word_statistics(words: Optional[Iterable[str]] = None) -> Dict:
    """Summarises the word list: size, vowel density and letter frequency."""
    words = list(WORD_LIST if words is None else words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
