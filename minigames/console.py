from typing import Callable, TypeVar

T = TypeVar("T")


def get_input_from_user(parse: Callable[[str], T], prompt: str = "",
                        read: Callable[[str], str] = input,
                        write: Callable[[str], None] = print) -> T:
    """
    Reads lines until `parse` accepts one. `parse` rejects a line by raising
    ValueError. EOFError from `read` propagates.
    """
    while True:
        line = read(prompt)
        try:
            return parse(line.strip())
        except ValueError:
            write("Invalid input, please try again.")


def parse_char(line: str) -> str:
    if not line:
        raise ValueError("empty input")
    return line[0]


def parse_letter(line: str) -> str:
    if len(line) != 1 or not line.isalpha():
        raise ValueError(f"not a single letter: {line!r}")
    return line.lower()
