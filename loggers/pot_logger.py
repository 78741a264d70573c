import logging
from typing import Dict, List, Tuple

from data.types.pot_types import Pot

logger = logging.getLogger(__name__)


class PotLogger:
    """Handles all logging operations for side pot construction and distribution."""

    @staticmethod
    def log_new_pot(
        name: str, threshold: float, layer: float, contesters: int, size: float
    ) -> None:
        """Log creation of a pot for a contribution tier."""
        logger.debug(
            f"Created {name}: threshold={threshold}, layer={layer} x {contesters} "
            f"players, size={size}"
        )

    @staticmethod
    def log_initial_pot_folded(initial_pot: float, main_pot_size: float) -> None:
        """Log when chips already in the pot are added to the main pot."""
        logger.debug(
            f"Folded initial pot {initial_pot} into Main Pot (now {main_pot_size})"
        )

    @staticmethod
    def log_pots_built(pots: List[Pot]) -> None:
        """Log the full set of pots after a rebuild."""
        if not pots:
            logger.debug("No contributions, no pots built")
            return
        logger.debug(f"Built {len(pots)} pot(s):")
        for pot in pots:
            players_str = ", ".join(pot.eligible_players)
            logger.debug(f"  {pot.name}: ${pot.size} (Eligible: {players_str})")

    @staticmethod
    def log_winner_toggle(
        pot_index: int, board: int, player: str, checked: bool
    ) -> None:
        """Log a winner checkbox change coming from the caller."""
        state = "winner" if checked else "not winner"
        logger.debug(f"Pot {pot_index} board {board + 1}: {player} marked {state}")

    @staticmethod
    def log_winner_propagated(
        player: str, board: int, pot_indexes: List[int], checked: bool
    ) -> None:
        """Log forward propagation of a winner mark to later pots."""
        if not pot_indexes:
            return
        action = "Checked" if checked else "Cleared"
        logger.debug(
            f"{action} {player} on board {board + 1} for later pots {pot_indexes}"
        )

    @staticmethod
    def log_share_distributed(
        pot_name: str, board: int, share: float, winners: List[str]
    ) -> None:
        """Log one pot/board share being split among its winners."""
        logger.debug(
            f"{pot_name} board {board + 1}: ${share} split between "
            f"{', '.join(winners)}"
        )

    @staticmethod
    def log_unsettled(unsettled: List[Tuple[int, int]]) -> None:
        """Log pot/board shares that still have no winner."""
        if unsettled:
            logger.info(f"Pending settlement (pot, board): {unsettled}")

    @staticmethod
    def log_settlement(
        total_contributed: float,
        total_distributed: float,
        balanced: bool,
        winnings: Dict[str, float],
    ) -> None:
        """Log the result of a settlement pass."""
        if balanced:
            logger.debug(
                f"Balanced: contributed {total_contributed}, "
                f"distributed {total_distributed}"
            )
            return
        logger.warning(
            f"Unbalanced - Total contributed: {total_contributed}, "
            f"Total distributed: {total_distributed}"
        )
        logger.debug(f"Winnings: {winnings}")
