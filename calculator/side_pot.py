"""Side pot construction and winnings distribution.

Pots are built from contribution tiers: every chip layer above the previous
tier is multiplied by the number of players still contesting it, and only
those players are eligible to win it. Distribution then splits each pot,
per board, among the winners the caller selected.
"""

from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from calculator.amount import RawAmount, is_balanced, parse_amount, round_cents
from calculator.winners import winners_for
from data.types.pot_types import Contribution, Pot, SettlementResult, WinnerSelection
from loggers.pot_logger import PotLogger

MAX_BOARDS = 2


def clamp_board_count(raw: RawAmount, max_boards: int = MAX_BOARDS) -> int:
    """Read a board count, truncating fractions and clamping to [1, max_boards]."""
    boards = int(parse_amount(raw))
    return max(1, min(max_boards, boards))


def build_pots(
    contributions: Iterable[Contribution], initial_pot: float = 0.0
) -> List[Pot]:
    """
    Partition contributed chips into a main pot and side pots.

    Args:
        contributions: What each player put in this hand. Amounts of zero or
            less take no part in the pots.
        initial_pot: Chips already in the middle before this hand's
            contributions, added to the main pot.

    Returns:
        List[Pot]: Pots in ascending tier order. Empty when nobody
            contributed, even if ``initial_pot`` is set.

    Note:
        - Players with equal contributions resolve their tier together, so
          no pot opens between them
        - The contester count drops by one per player walked, whether or not
          that player opened a tier
    """
    # sorted() is stable, so ties keep input order in the eligible lists
    ordered = sorted(
        (c for c in contributions if c.amount > 0), key=lambda c: c.amount
    )

    pots: List[Pot] = []
    prev_bet = 0.0
    remaining = len(ordered)

    for i, contribution in enumerate(ordered):
        if contribution.amount > prev_bet:
            layer = contribution.amount - prev_bet
            size = layer * remaining
            if not pots and initial_pot > 0:
                size += initial_pot
                PotLogger.log_initial_pot_folded(initial_pot, size)
            pot = Pot(
                tier=len(pots),
                size=size,
                eligible_players=[c.player for c in ordered[i:]],
            )
            PotLogger.log_new_pot(
                pot.name, contribution.amount, layer, remaining, size
            )
            pots.append(pot)

        remaining -= 1
        prev_bet = contribution.amount

    PotLogger.log_pots_built(pots)
    return pots


def distribute_winnings(
    pots: List[Pot],
    selections: Iterable[WinnerSelection],
    board_count: int = 1,
) -> Dict[str, float]:
    """
    Split every pot among its selected winners, board by board.

    Each board receives ``pot.size / board_count``; a board's share is divided
    evenly between the winners selected for that pot on that board. Shares
    with no winner selected are left undistributed.

    Returns:
        Dict[str, float]: Amount won per player, rounded to the cent. Only
            players who won something appear.
    """
    selections = frozenset(selections)
    board_count = max(1, min(MAX_BOARDS, board_count))
    winnings: Dict[str, float] = {}

    for pot_index, pot in enumerate(pots):
        share = pot.size / board_count
        for board in range(board_count):
            winners = winners_for(pots, selections, pot_index, board)
            if not winners:
                continue
            per_winner = share / len(winners)
            for player in winners:
                winnings[player] = round_cents(winnings.get(player, 0.0) + per_winner)
            PotLogger.log_share_distributed(pot.name, board, share, winners)

    return winnings


def unsettled_shares(
    pots: List[Pot], selections: FrozenSet[WinnerSelection], board_count: int
) -> List[Tuple[int, int]]:
    """List (pot_index, board) pairs with no winner selected."""
    return [
        (pot_index, board)
        for pot_index in range(len(pots))
        for board in range(board_count)
        if not winners_for(pots, selections, pot_index, board)
    ]


def settle(
    contributions: Iterable[Contribution],
    selections: Iterable[WinnerSelection] = (),
    initial_pot: float = 0.0,
    board_count: int = 1,
    pots: Optional[List[Pot]] = None,
) -> SettlementResult:
    """
    Build the pots, distribute them and check the books balance.

    Args:
        contributions: Every player's contribution this hand.
        selections: Winners per pot and board.
        initial_pot: Chips in the middle before this hand.
        board_count: 1, or 2 when running it twice.
        pots: Pots already built from the same contributions, to skip a
            rebuild.

    Returns:
        SettlementResult: Winnings per player, totals, the balance flag and
            the pot/board shares still waiting for a winner.
    """
    contributions = list(contributions)
    selections = frozenset(selections)
    board_count = max(1, min(MAX_BOARDS, board_count))
    if pots is None:
        pots = build_pots(contributions, initial_pot)

    winnings = distribute_winnings(pots, selections, board_count)
    total_contributed = sum(max(c.amount, 0.0) for c in contributions) + max(
        initial_pot, 0.0
    )
    total_distributed = sum(winnings.values())
    balanced = is_balanced(total_distributed, total_contributed)
    unsettled = unsettled_shares(pots, selections, board_count)

    PotLogger.log_unsettled(unsettled)
    PotLogger.log_settlement(total_contributed, total_distributed, balanced, winnings)

    return SettlementResult(
        per_player_payout=winnings,
        total_contributed=total_contributed,
        total_distributed=total_distributed,
        balanced=balanced,
        unsettled=unsettled,
    )
