import pytest

from calculator.config import CalculatorConfig
from calculator.payout_table import PayoutTable
from calculator.sidepot_table import SidePotTable
from data.types.pot_types import Contribution


@pytest.fixture(autouse=True)
def setup_logging():
    """Automatically disable logging for all tests."""
    import logging

    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def contributions():
    """Factory turning a {player: amount} dict into contributions, in dict order."""

    def _make(amounts):
        return [Contribution(player=name, amount=amount) for name, amount in amounts.items()]

    return _make


@pytest.fixture
def config():
    return CalculatorConfig()


@pytest.fixture
def side_pot_table(config):
    """A fresh side pot table with the default two empty rows."""
    return SidePotTable(config)


@pytest.fixture
def payout_table(config):
    """A fresh payout table with the default two rows."""
    return PayoutTable(config)


@pytest.fixture
def seated_side_pot_table(side_pot_table):
    """Side pot table with Alice 5, Bob 10 and Charlie 10."""
    side_pot_table.set_name(0, "Alice")
    side_pot_table.set_bet(0, "5")
    side_pot_table.set_name(1, "Bob")
    side_pot_table.set_bet(1, "10")
    side_pot_table.add_row(name="Charlie", bet="10")
    return side_pot_table
