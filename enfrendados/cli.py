"""Interactive console game: menu, match flow, turns and screens."""

from __future__ import annotations

import argparse
import os
import random
import sys
from collections.abc import Callable, Iterable

from enfrendados.art import (
    Styled,
    credits_lines,
    no_winner_lines,
    tie_banner,
    title_banner,
    trophy_lines,
    waiting_banner,
    winner_banner,
)
from enfrendados.dice import die_face
from enfrendados.game import (
    Hand,
    InvalidSelection,
    MatchResult,
    Player,
    Scoreboard,
    TurnOutcome,
    decide_result,
    first_player_order,
    match_over,
    settle_turn,
)
from enfrendados.terminal import Color, Terminal, read_char

_RULE = "-------------------------------------------------------"
_BACKSPACES = ("\b", "\x7f")


def _say(term: Terminal, text: str = "", color: Color | None = None) -> None:
    if color is not None:
        term.set_color(color)
    term.write(text + "\n")


def _draw(term: Terminal, lines: Iterable[Styled]) -> None:
    for line in lines:
        if line.color is not None:
            term.set_color(line.color)
        term.write(line.text + "\n")


def _beep(term: Terminal) -> None:
    term.write("\a")


def _read_line(term: Terminal) -> str:
    """Read characters until Return, echoing them as they arrive."""
    chars: list[str] = []
    while True:
        for ch in term.reader():
            if ch in "\r\n":
                term.write("\n")
                return "".join(chars)
            if ch in _BACKSPACES:
                if chars:
                    chars.pop()
                    term.write("\b \b")
                continue
            chars.append(ch)
            term.write(ch)


def _read_word(term: Terminal) -> str:
    """Read lines until one holds something; return its first word."""
    while True:
        words = _read_line(term).split()
        if words:
            return words[0]


def _read_int(term: Terminal) -> int | None:
    try:
        return int(_read_word(term))
    except ValueError:
        return None


def _sum_text(values: list[int]) -> str:
    return " + ".join(str(value) for value in values)


def _announce_penalty(term: Terminal, player: Player, opponent: Player) -> None:
    if opponent.stock > 1:
        _say(
            term,
            f"\n{opponent.name} pierde un dado y {player.name} "
            "recibe uno por penalización.",
        )
        _beep(term)
    else:
        _say(
            term,
            f"\n{opponent.name} no puede perder más dados (solo tiene 1). "
            "No se aplica penalización.",
        )


def _choose_dice(
    term: Terminal, player: Player, opponent: Player, hand: Hand
) -> TurnOutcome:
    """Let the player pick dice until the turn is decided."""
    while True:
        term.sleep(500)
        term.set_color(Color.YELLOW)
        term.write("Tus dados: \n\n")
        term.write("".join(f"[{i + 1}]:{v}  " for i, v in hand.remaining()) + "\n")
        term.set_color(Color.WHITE)
        term.write("\nElegi un dado [índice] o 0 para finalizar la ronda => ")
        choice = _read_int(term)

        if choice == 0:
            _say(term, "\nRonda finalizada por el jugador, no suma puntos.", Color.RED)
            _beep(term)
            _announce_penalty(term, player, opponent)
            return TurnOutcome.GAVE_UP

        try:
            if choice is None:
                raise InvalidSelection("not a number")
            hand.select(choice - 1)
        except InvalidSelection:
            _say(term, "\nDado ya elegido o fuera de rango de selección.", Color.RED)
            _beep(term)
            continue

        chosen = hand.chosen_values
        _say(term, f"\n● Numero Objetivo: {hand.target}", Color.LIGHTBLUE)
        term.set_color(Color.GREEN)
        term.write(f"\nElegiste: {_sum_text(chosen)} = {hand.total()}")
        term.set_color(Color.WHITE)
        _say(term, "\n" + _RULE)

        outcome = hand.outcome()
        if outcome is TurnOutcome.SUCCESS:
            term.set_background_color(Color.BLACK)
            term.set_color(Color.LIGHTGREEN)
            term.write("¡TIRADA EXITOSA!")
            term.set_background_color(Color.BLACK)
            term.set_color(Color.WHITE)
            term.write("\n")
            _say(term, f"\n● Numero Objetivo: {hand.target}")
            _say(term, f"● Combinación elegida: {_sum_text(chosen)} = {hand.total()}")
            return outcome
        if outcome is TurnOutcome.OVERSHOOT:
            term.set_background_color(Color.BLACK)
            _say(
                term,
                "\nSufres una PENALIZACIÓN por elegir mal tus dados "
                "y NO sumarás puntos.",
                Color.RED,
            )
            _beep(term)
            _announce_penalty(term, player, opponent)
            term.set_background_color(Color.BLACK)
            term.set_color(Color.WHITE)
            return outcome


def play_turn(
    term: Terminal,
    player: Player,
    opponent: Player,
    rng: random.Random | None = None,
) -> TurnOutcome:
    """Play one turn for ``player`` against ``opponent`` and return how it ended."""
    term.set_background_color(Color.BLACK)
    _say(term, "\n" + _RULE, Color.WHITE)
    _say(term, f"Turno de: {player.name}", Color.LIGHTRED)
    _say(term, f"\nStock actual de dados: {player.stock}", Color.YELLOW)

    hand = Hand.roll(player.stock, rng)

    term.sleep(500)
    term.hide_cursor()
    _say(term, "\nPresiona ENTER para lanzar tus dados de doce caras...", Color.WHITE)
    term.anykey()
    term.sleep(1000)
    first, second = hand.target_dice
    _say(term, f"\nNumero objetivo: {first} + {second} = {hand.target}", Color.YELLOW)
    _say(term, _RULE)

    term.show_cursor()
    outcome = _choose_dice(term, player, opponent, hand)
    earned = settle_turn(player, opponent, hand, outcome)
    if outcome is TurnOutcome.SUCCESS and player.stock == 0:
        return outcome

    term.sleep(700)
    term.set_background_color(Color.BLACK)
    term.set_color(Color.WHITE)
    if outcome is TurnOutcome.SUCCESS:
        used = len(hand.chosen)
        _say(term, f"● Dados elegidos: {used}")
        _say(term, f"● Puntos: {hand.target} * {used} = {earned}")
        _say(term, f"● Transfiere {used} dados a {opponent.name}")
    else:
        _say(term, "\n● No sumaste puntos por penalización.")
        _say(term, "● Puntos: 0")

    _say(term, "\n" + _RULE)
    _say(term, f"Fin del turno de {player.name}", Color.YELLOW)
    for someone in (player, opponent):
        _say(
            term,
            f"\n=> {someone.name}: {someone.stock} dados stock restantes "
            f"y {someone.points} pts.",
        )

    term.hide_cursor()
    _say(term, "\nPresiona una tecla para continuar...")
    term.anykey()
    term.sleep(10)
    term.write("\n")
    _draw(term, waiting_banner())
    term.write("\n")
    term.sleep(2000)
    term.cls()
    return outcome


def play_round(
    term: Terminal,
    order: tuple[Player, Player],
    rng: random.Random | None = None,
) -> list[TurnOutcome]:
    """Play a round: the starter, then the other player unless a stock ran out."""
    starter, follower = order
    outcomes = [play_turn(term, starter, follower, rng)]
    if starter.stock == 0 or follower.stock == 0:
        return outcomes
    outcomes.append(play_turn(term, follower, starter, rng))
    return outcomes


def _show_rules(term: Terminal) -> None:
    term.write("¡Bienvenido a Enfrendados!")
    term.sleep(1000)
    _say(term, "\n\n¿Cómo se juega?", Color.YELLOW)
    term.sleep(1000)
    term.set_color(Color.WHITE)
    term.write(
        "\nEnfrendados es un emocionante juego de dados para dos jugadores donde "
        "competirán para acumular la mayor cantidad de puntos "
        "\nen tres rondas. Cada jugador tiene un conjunto de dados y deberá seguir "
        "las instrucciones en cada turno para lograr "
        "\ncombinaciones que sumen el número objetivo.\n"
    )
    _say(term, "\nResumen de las reglas principales:", Color.YELLOW)
    term.set_color(Color.WHITE)
    _say(
        term,
        "\n- Datos: Cada jugador inicia con 6 dados de seis caras y, en cada turno, "
        "se lanzan 2 dados de doce caras que definen el número objetivo.",
    )
    _say(
        term,
        "\n- El objetivo del turno: Seleccionar una combinación de dados del stock "
        "cuyo suma de caras iguale el número objetivo.",
    )
    _say(
        term,
        "\n- Puntuación: Si logras igualar el número objetivo, ganas puntos igual a "
        "ese número multiplicado por la cantidad de dados usados y transferís "
        "\n  esos dados al oponente.",
    )
    _say(
        term,
        "\n- Penalización: Si no logras la suma, debes recibir un dado de tu "
        "oponente, si tiene más de uno en su stock.",
    )
    _say(
        term,
        "\n- Ganador automático: Si en alguna tirada terminas sin dados, ganas "
        "automáticamente y obtienes 10,000 puntos.",
    )
    _say(
        term,
        "\n- Final del juego: Después de tres rondas, gana quien tenga más puntos, "
        "o hay empate si ambos tienen la misma puntuación.",
    )
    _say(
        term,
        "\n\n¡Prepárate para desafiar a tu oponente en un juego estratégico y "
        "lleno de azar!",
        Color.YELLOW,
    )
    term.sleep(1000)
    term.write("\n¿Listo para comenzar? ¡Que tenga buena suerte!")
    term.set_color(Color.WHITE)
    term.write("\n\nPresioná una tecla para continuar...")
    term.anykey()
    term.cls()


def _ask_names(term: Terminal) -> tuple[str, str]:
    term.set_background_color(Color.YELLOW)
    term.set_color(Color.BLACK)
    term.write("¡QUE COMIENCE EL JUEGO!\n\n")
    term.reset_color()
    term.set_background_color(Color.BLACK)
    term.set_color(Color.WHITE)
    term.show_cursor()

    _say(term, "Ingrese el nombre del Jugador/a 1: ")
    term.locate(36, 3)
    first = _read_word(term)
    _say(term, "Ingrese el nombre del Jugador/a 2: ")
    term.locate(36, 4)
    second = _read_word(term)
    term.write("\n")
    return first, second


def _roll_for_start(
    term: Terminal, first: Player, second: Player, rng: random.Random | None
) -> tuple[Player, Player]:
    term.cls()
    term.set_background_color(Color.YELLOW)
    term.set_color(Color.BLACK)
    _say(term, "VEAMOS QUIÉN EMPIEZA...")
    term.sleep(1000)
    term.reset_color()
    term.set_background_color(Color.BLACK)
    term.set_color(Color.WHITE)
    term.hide_cursor()

    first_roll, second_roll = first_player_order(rng)
    for player, roll in ((first, first_roll), (second, second_roll)):
        _say(term, f"\n{player.name} presioná una tecla para lanzar tu dado.")
        term.anykey()
        term.sleep(2000)
        _say(term, f"\n=> {player.name} lanzó: {roll}", Color.YELLOW)
        term.write("\n".join(die_face(roll)) + "\n")
        if player is first:
            term.sleep(1000)
            term.set_color(Color.WHITE)
            term.write("\n")
    _say(term, "--------------------------------------------------------------------")

    order = (first, second) if first_roll > second_roll else (second, first)
    term.set_color(Color.YELLOW)
    term.sleep(1500)
    _say(term, f"\n¡{order[0].name} comienza!")
    term.set_color(Color.WHITE)
    term.write("\nPresioná una tecla para continuar...")
    term.anykey()
    term.cls()
    term.show_cursor()
    return order


def _final_line(term: Terminal, player: Player) -> None:
    _say(
        term,
        f"\n{player.name} finalizó con: {player.stock} dados stock "
        f"y {player.points} puntos.",
    )


def _show_result(term: Terminal, result: MatchResult) -> None:
    if result.winner is None:
        term.sleep(1000)
        term.write("\n")
        _draw(term, tie_banner())
        term.reset_color()
        term.write("\n")
        term.set_background_color(Color.BLACK)
        term.set_color(Color.WHITE)
        term.write("\n")
        _final_line(term, result.first)
        _final_line(term, result.second)
        return

    winner, loser = result.winner, result.loser
    term.sleep(1000)
    term.set_color(Color.WHITE)
    term.locate(30, 3)
    term.write(f"\n{winner.name} es el/la ganador/a!")
    term.reset_color()
    term.set_background_color(Color.BLACK)
    term.set_color(Color.WHITE)
    term.write("\n")
    _final_line(term, winner)
    if loser is not None:
        _final_line(term, loser)
    term.write("\n\n")
    _draw(term, winner_banner())
    term.write("\n")


def play_match(
    term: Terminal, scoreboard: Scoreboard, rng: random.Random | None = None
) -> MatchResult:
    """Play a whole match, record it on the scoreboard and return its result."""
    _show_rules(term)
    first_name, second_name = _ask_names(term)
    first, second = Player(first_name), Player(second_name)
    order = _roll_for_start(term, first, second, rng)

    round_number = 0
    while True:
        round_number += 1
        term.cls()
        term.set_background_color(Color.YELLOW)
        term.set_color(Color.BLACK)
        _say(term, f"\n========= RONDA N°{round_number} =========")
        play_round(term, order, rng)
        if match_over(round_number, first, second):
            break
    term.cls()

    result = decide_result(first, second)
    scoreboard.record(result)
    _show_result(term, result)
    return result


def show_statistics(term: Terminal, scoreboard: Scoreboard) -> None:
    """Show the all-time champion, or a notice that nobody has won yet."""
    if scoreboard.best > 0:
        term.set_background_color(Color.BLACK)
        _draw(term, trophy_lines())
        term.set_background_color(Color.BLACK)
        term.set_color(Color.YELLOW)
        _say(term, "\n============ Campeón histórico ============  ")
        _say(term, f"             {scoreboard.champion}: {scoreboard.best} pts")
    else:
        _draw(term, no_winner_lines())


def show_credits(term: Terminal) -> None:
    """Show the team credits."""
    _draw(term, credits_lines())
    term.reset_color()


def confirm_exit(term: Terminal) -> bool:
    """Ask whether to leave; True for 's', False for 'n', ask again otherwise."""
    while True:
        term.write("Seguro que deseas salir? (s/n): ")
        answer = _read_word(term)[0].lower()
        if answer in ("s", "n"):
            return answer == "s"
        _say(term, "Entrada invalida. Por favor ingresa 's' o 'n'.")


def _show_menu(term: Terminal) -> None:
    term.cls()
    term.set_background_color(Color.BLACK)
    _draw(term, title_banner())
    term.set_color(Color.WHITE)
    _say(
        term,
        "\nBienvenidos a Enfrendados, un juego en el que interviene el azar "
        "y las matematicas. ¡Suerte!",
    )
    term.set_color(Color.YELLOW)
    for line in (
        "\n==========================",
        "1) JUGAR             ",
        "2) ESTADÍSTICAS      ",
        "3) CRÉDITOS          ",
        "==========================",
        "0) SALIR",
    ):
        _say(term, line)
    term.set_color(Color.WHITE)
    term.write("\n=> Elige tu opción: ")
    term.reset_color()


def _run_menu(term: Terminal, scoreboard: Scoreboard, rng: random.Random) -> None:
    back = "\nPresiona una tecla para volver al menú principal..."
    while True:
        _show_menu(term)
        option = _read_int(term)
        term.cls()
        if option == 1:
            play_match(term, scoreboard, rng)
            term.anykey(back)
        elif option == 2:
            show_statistics(term, scoreboard)
            term.anykey(back)
        elif option == 3:
            show_credits(term)
            term.anykey(back)
        elif option == 0:
            leave = confirm_exit(term)
            _say(term, "\n¡HASTA LA PRÓXIMA!")
            if leave:
                return
        else:
            _say(term, "Opcion invalida. Intente otra vez.")
            term.anykey("Presiona una tecla para continuar...")


def _stdin_reader() -> Callable[[], str]:
    if sys.stdin.isatty():
        return read_char

    def read_piped() -> str:
        ch = sys.stdin.read(1)
        if not ch:
            raise EOFError("end of input")
        return ch

    return read_piped


def main(argv: list[str] | None = None) -> int:
    """Run the game menu until the players choose to leave."""
    parser = argparse.ArgumentParser(
        prog="enfrendados", description="Juego de dados para dos jugadores."
    )
    parser.add_argument("--seed", type=int, default=None, help="semilla de los dados")
    args = parser.parse_args(argv)

    if os.name == "nt" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    term = Terminal(reader=_stdin_reader())
    rng = random.Random(args.seed)
    try:
        _run_menu(term, Scoreboard(), rng)
    except (EOFError, KeyboardInterrupt):
        term.reset_color()
        term.show_cursor()
        term.write("\n")
    return 0