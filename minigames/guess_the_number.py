import logging
import random

from .config import GUESS_MAX, GUESS_MIN
from .console import get_input_from_user

logger = logging.getLogger(__name__)


def play_guess_the_number(rng=random, read=input, write=print) -> int:
    """Returns the number of guesses it took."""
    number = rng.randint(GUESS_MIN, GUESS_MAX)
    logger.info("Starting Guess the Number")
    write(f"I picked a number between {GUESS_MIN} and {GUESS_MAX}")
    guesses = 0
    while True:
        guess = get_input_from_user(int, "Make a guess: ", read, write)
        guesses += 1
        if guess < number:
            write("Greater")
        elif guess > number:
            write("Smaller")
        else:
            write("Congrats, you won!")
            logger.info("Number found in %d guesses", guesses)
            return guesses
