from __future__ import annotations

from themine.domain.tile import Empty, Monster, TileKind
from themine.services.monster_ai import MonsterAI, MonsterMove
from tests.helpers.builders import explored_area, make_board


def test_up_wins_ties_between_equally_short_steps() -> None:
    board = make_board(
        explored=[(5, 4), (5, 6), (4, 5), (6, 5), (5, 3)],
        monsters=[(5, 5)],
    )

    result = MonsterAI().tick(board, (5, 3))

    assert result.moves == [MonsterMove((5, 5), (5, 4))]
    assert board[(5, 4)].kind is TileKind.MONSTER
    assert board[(5, 5)].content == Empty(has_metal=False)
    assert board[(5, 5)].explored
    assert not result.caught


def test_later_direction_must_beat_the_best_so_far() -> None:
    board = make_board(explored=explored_area(range(3, 8), range(3, 8)), monsters=[(5, 5)])

    # Up and Left both reach distance 2; Up is evaluated first and Left does not improve on it.
    result = MonsterAI().tick(board, (3, 4))

    assert result.moves == [MonsterMove((5, 5), (5, 4))]


def test_only_strict_improvement_moves_the_monster() -> None:
    board = make_board(explored=explored_area(range(0, 10), range(0, 10)), monsters=[(5, 5)])

    result = MonsterAI().tick(board, (2, 5))

    assert result.moves == [MonsterMove((5, 5), (4, 5))]


def test_monster_cannot_enter_unexplored_ground() -> None:
    board = make_board(monsters=[(5, 5)])

    result = MonsterAI().tick(board, (5, 0))

    assert result.moves == []
    assert board[(5, 5)].kind is TileKind.MONSTER


def test_stone_and_other_monsters_block_steps() -> None:
    board = make_board(
        explored=[(5, 3), (4, 4), (6, 4)],
        stones=[(5, 3)],
        monsters=[(5, 4), (4, 4)],
    )

    result = MonsterAI().tick(board, (5, 0))

    # (5, 4) is walled by stone above; (4, 4) cannot step into its neighbour's cell.
    assert result.moves == []
    assert board[(5, 3)].kind is TileKind.STONE
    assert board.positions(TileKind.MONSTER) == [(4, 4), (5, 4)]


def test_grace_tick_delays_the_first_move() -> None:
    board = make_board(explored=[(5, 4), (5, 3)], monsters=[(5, 5)], grace=1)
    ai = MonsterAI()

    first = ai.tick(board, (5, 3))

    assert first.moves == []
    assert board[(5, 5)].content == Monster(grace_ticks=0)

    second = ai.tick(board, (5, 3))

    assert second.moves == [MonsterMove((5, 5), (5, 4))]


def test_monster_reaching_the_player_catches_them() -> None:
    board = make_board(explored=[(0, 0)], monsters=[(0, 1)])

    result = MonsterAI().tick(board, (0, 0))

    assert result.caught
    assert board[(0, 0)].kind is TileKind.MONSTER


def test_monsters_decide_from_the_tick_start_snapshot() -> None:
    board = make_board(explored=explored_area(range(0, 10), range(0, 1)), monsters=[(3, 0), (4, 0)])

    result = MonsterAI().tick(board, (0, 0))

    # (4, 0) still sees (3, 0) occupied, so it does not follow into the vacated cell.
    assert result.moves == [MonsterMove((3, 0), (2, 0))]
    assert board.positions(TileKind.MONSTER) == [(2, 0), (4, 0)]


def test_shared_destination_is_not_deconflicted() -> None:
    board = make_board(explored=[(5, 5)], monsters=[(4, 5), (6, 5)])

    result = MonsterAI().tick(board, (5, 9))

    assert result.moves == [MonsterMove((4, 5), (5, 5)), MonsterMove((6, 5), (5, 5))]
    assert board.positions(TileKind.MONSTER) == [(5, 5)]
