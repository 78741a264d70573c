"""Winner selection rules over a tier-ordered list of pots.

Selections are sparse ``frozenset``s of :class:`WinnerSelection` triples.
Every function here returns a new set and leaves its input untouched.
"""

from typing import FrozenSet, Iterable, List, Optional

from data.types.pot_types import Pot, WinnerSelection
from loggers.pot_logger import PotLogger

Selections = FrozenSet[WinnerSelection]


def winners_for(
    pots: List[Pot], selections: Iterable[WinnerSelection], pot_index: int, board: int
) -> List[str]:
    """Selected winners of one pot on one board, in the pot's eligible order."""
    chosen = {
        s.player
        for s in selections
        if s.pot_index == pot_index and s.board == board
    }
    if not chosen:
        return []
    return [p for p in pots[pot_index].eligible_players if p in chosen]


def toggle_winner(
    pots: List[Pot],
    selections: Iterable[WinnerSelection],
    pot_index: int,
    board: int,
    player: str,
    checked: bool,
) -> Selections:
    """
    Mark or unmark a player as winner of a pot and carry the mark forward.

    A player who wins a pot also holds the best hand among everyone contesting
    any later pot they are eligible for, so the same state is applied to every
    later pot on the same board whose eligible players include them. Earlier
    pots and the other board are never touched.

    Args:
        pots: Pots in ascending tier order.
        selections: Current winner selections.
        pot_index: Pot whose checkbox changed.
        board: Board the checkbox belongs to.
        player: Player whose checkbox changed. Must be eligible for the pot.
        checked: New checkbox state.

    Returns:
        Selections: The updated selection set.
    """
    updated = set(selections)
    PotLogger.log_winner_toggle(pot_index, board, player, checked)

    touched = [pot_index]
    for later in range(pot_index + 1, len(pots)):
        if pots[later].is_eligible(player):
            touched.append(later)

    for index in touched:
        mark = WinnerSelection(pot_index=index, board=board, player=player)
        if checked:
            updated.add(mark)
        else:
            updated.discard(mark)

    PotLogger.log_winner_propagated(player, board, touched[1:], checked)
    return frozenset(updated)


def reconcile_winners(
    pots: List[Pot],
    board_count: int,
    previous_pots: Optional[List[Pot]] = None,
    previous_selections: Iterable[WinnerSelection] = (),
) -> Selections:
    """
    Work out the winner selections for freshly rebuilt pots.

    Args:
        pots: The rebuilt pots.
        board_count: Boards in play after the rebuild.
        previous_pots: Pots before the rebuild, if any.
        previous_selections: Selections made against ``previous_pots``.

    Returns:
        Selections: A pot with a single eligible player is always won by that
            player on every board. For other pots a previous selection is kept
            when the same pot index had more than one eligible player before,
            the player is still eligible and the board still exists.
    """
    previous_pots = previous_pots or []
    carried = {
        s
        for s in previous_selections
        if s.pot_index < len(previous_pots)
        and len(previous_pots[s.pot_index].eligible_players) > 1
    }

    result = set()
    for pot_index, pot in enumerate(pots):
        for board in range(board_count):
            if len(pot.eligible_players) == 1:
                result.add(
                    WinnerSelection(
                        pot_index=pot_index, board=board, player=pot.eligible_players[0]
                    )
                )
                continue
            for player in pot.eligible_players:
                mark = WinnerSelection(pot_index=pot_index, board=board, player=player)
                if mark in carried:
                    result.add(mark)

    return frozenset(result)
