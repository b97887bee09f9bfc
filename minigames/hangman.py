import logging
import random
from dataclasses import dataclass, field
from typing import Set

from .config import HANGMAN_LIVES, HANGMAN_WORDS
from .console import get_input_from_user, parse_letter

logger = logging.getLogger(__name__)


@dataclass
class Hangman:
    word: str
    lives: int = HANGMAN_LIVES
    guessed: Set[str] = field(default_factory=set)

    def mask(self) -> str:
        return "".join(c if c in self.guessed else "_" for c in self.word)

    def is_won(self) -> bool:
        return all(c in self.guessed for c in self.word)

    def is_lost(self) -> bool:
        return self.lives <= 0

    def guess(self, letter: str) -> bool:
        """Returns False when the letter was already tried."""
        if letter in self.guessed:
            return False
        self.guessed.add(letter)
        if letter not in self.word:
            self.lives -= 1
        return True


def pick_a_random_word(rng=random) -> str:
    return rng.choice(HANGMAN_WORDS)


def play_hangman(rng=random, read=input, write=print) -> bool:
    """Returns True if the player found the word."""
    game = Hangman(pick_a_random_word(rng))
    logger.info("Starting Hangman")
    while not game.is_won() and not game.is_lost():
        write(f"You have {game.lives} lives")
        write(game.mask())
        letter = get_input_from_user(parse_letter, "Guess a letter: ", read, write)
        if not game.guess(letter):
            write("You already tried that letter!")
        elif letter in game.word:
            write("Nice, that letter is in the word!")
        else:
            write("Nope, not in the word!")
    if game.is_won():
        write(f"Congrats, you won! The word was: {game.word}")
    else:
        write(f"Sorry, you lost... The word was: {game.word}")
    logger.info("Hangman over, won=%s", game.is_won())
    return game.is_won()
