import logging
from typing import Callable, Dict, NamedTuple

from .connect_4 import play_connect_4
from .console import get_input_from_user, parse_char
from .guess_the_number import play_guess_the_number
from .hangman import play_hangman
from .noughts_and_crosses import play_noughts_and_crosses

logger = logging.getLogger(__name__)

QUIT = "q"


class Game(NamedTuple):
    name: str
    play: Callable[[], object]


GAMES: Dict[str, Game] = {
    "1": Game("Guess the Number", play_guess_the_number),
    "2": Game("Hangman", play_hangman),
    "3": Game("Noughts and Crosses", play_noughts_and_crosses),
    "4": Game("Connect 4", play_connect_4),
}


def show_the_list_of_commands(games: Dict[str, Game], write=print):
    write("What do you want to do?")
    for command, game in games.items():
        write(f'{command}: Play "{game.name}"')
    write(f"{QUIT}: Quit")


def show_menu(games: Dict[str, Game] = GAMES, read=input, write=print):
    while True:
        show_the_list_of_commands(games, write)
        try:
            command = get_input_from_user(parse_char, "", read, write)
        except EOFError:
            break
        if command == QUIT:
            break
        game = games.get(command)
        if game is None:
            write("Sorry I don't know that command!")
            continue
        logger.info("Playing %s", game.name)
        try:
            game.play()
        except EOFError:
            logger.info("Input ended during %s", game.name)
            break
    logger.info("Quitting")
