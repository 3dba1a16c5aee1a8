"""Coloured text art shown by the game: banners, trophy and credits."""

from __future__ import annotations

from typing import NamedTuple

from enfrendados.terminal import Color


class Styled(NamedTuple):
    """One line of art and the colour to draw it in (None: default colour)."""

    color: Color | None
    text: str


def _lines(color: Color | None, *texts: str) -> tuple[Styled, ...]:
    return tuple(Styled(color, text) for text in texts)


def title_banner() -> tuple[Styled, ...]:
    """Return the game's title banner."""
    return (
        *_lines(
            Color.YELLOW,
            "███████╗███╗   ██╗███████╗██████╗ ███████╗███╗   ██╗██████╗  █████╗ ██████╗  ██████╗ ███████╗",
            "██╔════╝████╗  ██║██╔════╝██╔══██╗██╔════╝████╗  ██║██╔══██╗██╔══██╗██╔══██╗██╔═══██╗██╔════╝",
        ),
        *_lines(
            Color.WHITE,
            "█████╗  ██╔██╗ ██║█████╗  ██████╔╝█████╗  ██╔██╗ ██║██║  ██║███████║██║  ██║██║   ██║███████╗",
            "██╔══╝  ██║╚██╗██║██╔══╝  ██╔══██╗██╔══╝  ██║╚██╗██║██║  ██║██╔══██║██║  ██║██║   ██║╚════██║",
        ),
        *_lines(
            Color.YELLOW,
            "███████╗██║ ╚████║██║     ██║  ██║███████╗██║ ╚████║██████╔╝██║  ██║██████╔╝╚██████╔╝███████║",
            "╚══════╝╚═╝  ╚═══╝╚═╝     ╚═╝  ╚═╝╚══════╝╚═╝  ╚═══╝╚═════╝ ╚═╝  ╚═╝╚═════╝  ╚═════╝ ╚══════╝",
        ),
    )


def credits_lines() -> tuple[Styled, ...]:
    """Return the credits screen: team name and rocket."""
    return (
        *_lines(
            Color.WHITE,
            "===========================================",
            "             EQUIPO ROCKET                 ",
            "===========================================",
        ),
        *_lines(
            Color.DARKGREY,
            "                   ^",
            "                  /^\\\\",
            "                 /___\\\\",
            "                |=   =|",
            "                |     |",
            "                |     |",
            "                |     |",
            "               /|##!##|\\",
            "              / |##!##| \\",
            "             /  |##!##|  \\",
            "            |  / ^ | ^ \\  |",
            "            | /  ( | )  \\ |",
            "            |/   ( | )   \\|",
        ),
        Styled(Color.YELLOW, "                ((   ))"),
        *_lines(
            Color.RED,
            "               ((  :  ))",
            "                ((   ))",
            "                 (( ))",
            "                  ( )",
        ),
        Styled(Color.WHITE, "----------      INTEGRANTES      ----------"),
        Styled(Color.WHITE, "==========================================="),
    )


def trophy_lines() -> tuple[Styled, ...]:
    """Return the golden trophy shown above the all-time champion."""
    return _lines(
        Color.YELLOW,
        "              ___________",
        "             '._==_==_=_.'",
        "             .-\\\\:      /-.",
        "            | (|:.     |) |",
        "             '-|:.     |-'",
        "               \\\\::.    /",
        "                '::. .'",
        "                  ) (",
        "                _.' '._",
        "               `\"\"\"\"\"\"\"`",
        "             __|_______|__",
        "            |~~~~~~~~~~~~~|",
    )


def no_winner_lines() -> tuple[Styled, ...]:
    """Return the picture shown while nobody has won a match yet."""
    return _lines(
        None,
        "    .    _    +     .  ______   .          .",
        " (      /|\\      .    |      \\      .   +",
        "     . |||||     _    | |   | | ||         .",
        ".      |||||    | |  _| | | | |_||    .",
        "   /\\  ||||| .  | | |   | |      |       .",
        "__||||_|||||____| |_|_____________\\__________",
        ". |||| |||||  /\\   _____      _____  .   .",
        "  |||| ||||| ||||   .   .  .         ________",
        " . \\|`-'|||| ||||    __________       .    .",
        "    \\__ |||| ||||      .          .     .",
        " __    ||||`-'|||  .       .    __________",
        ".    . |||| ___/  ___________             .",
        "   . _ ||||| . _               .   _________",
        "_   ___|||||__  _ \\\\--//    .          _",
        "     _ `---'    .)=\\oo|=(.   _   .   .    .",
        "_  ^      .  -    . \\.|",
        "",
        "==========  Aún no hay ganadores... ========== ",
    )


def winner_banner() -> tuple[Styled, ...]:
    """Return the fiery banner celebrating a winner."""
    return (
        *_lines(
            Color.YELLOW,
            "            (         )      )         (                  (         )      )         (     ",
            "   (  (      )\\ )   ( /(   ( /(         )\\ )     (  (      )\\ )   ( /(   ( /(         )\\ ) ",
        ),
        *_lines(
            Color.RED,
            "   )\\))(   '(()/(   )\\())  )\\())  (    (()/(     )\\))(   '(()/(   )\\())  )\\())  (    (()/( ",
            " ((_)()\\ )  /(_)) ((_)\\  ((_)\\   )\\    /(_))   ((_)()\\ )  /(_)) ((_)\\  ((_)\\   )\\    /(_))     ",
        ),
        Styled(
            Color.YELLOW,
            " _(())\\_)  ()(_))  _((_)  _((_) ((_)  (_))     _(())\\_)()(_))    _((_)  _((_) ((_)  (_))   ",
        ),
        *_lines(
            Color.WHITE,
            " \\ \\((_)/ /|_ _|  | \\| | | \\| | | __| | _ \\    \\ \\((_)/ /|_ _|  | \\| | | \\| | | __| | _ \\  ",
            "  \\ \\/\\/ /  | |   | .` | | .` | | _|  |   /     \\ \\/\\/ /  | |   | .` | | .` | | _|  |   /  ",
            "   \\_/\\_/  |___|  |_|\\_| |_|\\_| |___| |_|_\\      \\_/\\_/  |___|  |_|\\_| |_|\\_| |___| |_|_\\  ",
        ),
    )


def tie_banner() -> tuple[Styled, ...]:
    """Return the banner announcing a tie."""
    return (
        *_lines(
            Color.YELLOW,
            "███████╗███╗   ███╗██████╗  █████╗ ████████╗███████╗",
            "██╔════╝████╗ ████║██╔══██╗██╔══██╗╚══██╔══╝██╔════╝",
        ),
        *_lines(
            Color.WHITE,
            "█████╗  ██╔████╔██║██████╔╝███████║   ██║   █████╗  ",
            "██╔══╝  ██║╚██╔╝██║██╔═══╝ ██╔══██║   ██║   ██╔══╝  ",
        ),
        *_lines(
            Color.YELLOW,
            "███████╗██║ ╚═╝ ██║██║     ██║  ██║   ██║   ███████╗",
            "╚══════╝╚═╝     ╚═╝╚═╝     ╚═╝  ╚═╝   ╚═╝   ╚══════╝",
        ),
    )


def waiting_banner() -> tuple[Styled, ...]:
    """Return the loading bar shown between turns."""
    return (
        Styled(Color.WHITE, "░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░░"),
        Styled(Color.YELLOW, "░░█░░░░█▀▀▀█░█▀▀█░█▀▀▄░▀█▀░█▄░░█░█▀▀█░░"),
        Styled(Color.WHITE, "░░█░░░░█░░░█░█▄▄█░█░░█░░█░░█░█░█░█░▄▄░░"),
        Styled(Color.YELLOW, "░░█▄▄█░█▄▄▄█░█░░█░█▄▄▀░▄█▄░█░░▀█░█▄▄█░░"),
        Styled(Color.WHITE, "█▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀▀█"),
        Styled(Color.YELLOW, "█░██░██░██░██░██░██░██░██░██░░░░░░░░░░█"),
        Styled(Color.YELLOW, "█░██░██░██░██░██░██░██░██░██░░░░░░░░░░█"),
        Styled(Color.WHITE, "█▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄▄█"),
    )