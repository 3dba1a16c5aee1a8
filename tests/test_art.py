import pytest

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
from enfrendados.terminal import Color


def _check_styled(lines):
    assert len(lines) > 0
    for line in lines:
        assert isinstance(line, Styled)
        assert line.color is None or line.color in set(Color)
        assert "\n" not in line.text


def test_every_line_is_styled_text():
    _check_styled(title_banner())
    _check_styled(credits_lines())
    _check_styled(trophy_lines())
    _check_styled(no_winner_lines())
    _check_styled(winner_banner())
    _check_styled(tie_banner())
    _check_styled(waiting_banner())


def test_art_is_stable_between_calls():
    assert title_banner() == title_banner()
    assert credits_lines() == credits_lines()
    assert trophy_lines() == trophy_lines()
    assert no_winner_lines() == no_winner_lines()
    assert winner_banner() == winner_banner()
    assert tie_banner() == tie_banner()
    assert waiting_banner() == waiting_banner()
    assert title_banner() != tie_banner()


@pytest.mark.parametrize("factory", [title_banner, tie_banner, waiting_banner])
def test_block_banners_have_equal_width_lines(factory):
    widths = {len(line.text) for line in factory()}
    assert len(widths) == 1


def test_title_banner_colours_follow_source_order():
    colors = [line.color for line in title_banner()]
    assert colors == [Color.YELLOW, Color.YELLOW, Color.WHITE, Color.WHITE, Color.YELLOW, Color.YELLOW]


def test_tie_banner_colours_follow_source_order():
    colors = [line.color for line in tie_banner()]
    assert colors == [Color.YELLOW, Color.YELLOW, Color.WHITE, Color.WHITE, Color.YELLOW, Color.YELLOW]


def test_credits_name_the_team():
    texts = [line.text for line in credits_lines()]
    assert "             EQUIPO ROCKET                 " in texts
    assert texts[0] == texts[2] == texts[-1] == "==========================================="


def test_credits_rocket_has_flame_in_red():
    lines = credits_lines()
    red = [line.text for line in lines if line.color is Color.RED]
    assert "               ((  :  ))" in red


def test_trophy_is_gold():
    lines = trophy_lines()
    assert all(line.color is Color.YELLOW for line in lines)
    assert lines[0].text == "              ___________"


def test_no_winner_ends_with_message():
    lines = no_winner_lines()
    assert lines[-1].text == "==========  Aún no hay ganadores... ========== "
    assert lines[-2].text == ""


def test_winner_banner_ends_in_white():
    lines = winner_banner()
    assert [line.color for line in lines[-3:]] == [Color.WHITE] * 3
    assert lines[0].color is Color.YELLOW


def test_waiting_banner_alternates_frame_colours():
    lines = waiting_banner()
    assert lines[0].color is Color.WHITE
    assert lines[-1].color is Color.WHITE
    assert lines[1].color is Color.YELLOW