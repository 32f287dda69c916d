import shlex

from pyoscmd.domain.entities import CommandRepr, OwnedPresplit, Presplit, RawText
from pyoscmd.domain.errors import CommandSyntaxError
from pyoscmd.types import Argv

# str.strip() would also eat unicode spaces
_ASCII_WHITESPACE = " \t\n\x0c\r"


def _lines(text: str):
    for line in text.split("\n"):
        yield line.removesuffix("\r")


def remove_comments(text: str) -> str:
    """Drops every line starting with `//` and joins the rest back together.

    Lines are concatenated without a separator: continuation lines keep their
    own leading whitespace, so it is not trimmed here either.
    """
    return "".join(
        line
        for line in _lines(text)
        if not line.lstrip(_ASCII_WHITESPACE).startswith("//")
    )


def _words(text: str):
    """Splits like a POSIX shell.

    A `#` starting a word comments out the rest of the line, a `#` inside a
    word or quoted is kept.
    """
    lexer = shlex.shlex(text, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    stream = lexer.instream

    while True:
        start = stream.tell()
        char = stream.read(1)
        if char and char in lexer.whitespace:
            continue
        if char == "#":
            stream.readline()
            continue
        stream.seek(start)

        word = lexer.get_token()
        if word is None:
            return
        yield word


def collect_raw(text: str, strip_comments: bool = True) -> Argv:
    text = text.strip(_ASCII_WHITESPACE)
    if strip_comments:
        text = remove_comments(text)
    try:
        return tuple(_words(text))
    except ValueError as e:
        raise CommandSyntaxError(text, str(e)) from e


def normalize(command: CommandRepr, strip_comments: bool = True) -> Argv:
    """Turns any command representation into an argv tuple.

    Comment stripping only applies to raw text, pre-split commands are passed
    through item by item.
    """
    match command:
        case RawText(text):
            return collect_raw(text, strip_comments)
        case Presplit(items) | OwnedPresplit(items):
            return tuple(items)
        case _:
            raise TypeError(f"Not a command representation: {command!r}")
