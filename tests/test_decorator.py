from decimal import Decimal

import pytest

from patternkit.decorator import (
    DARK_ROAST_COST,
    DARK_ROAST_DESCRIPTION,
    ESPRESSO_COST,
    ESPRESSO_DESCRIPTION,
    MILK_COST,
    MILK_DESCRIPTION,
    Beverage,
    BeverageDecorator,
    DarkRoast,
    Espresso,
    MilkDecorator,
    run,
)


def test_espresso_description_and_cost():
    espresso = Espresso()
    assert espresso.description() == "Espresso"
    assert espresso.cost() == Decimal("1.99")


def test_dark_roast_description_and_cost():
    roast = DarkRoast()
    assert roast.description() == "Dark Rost"
    assert roast.cost() == Decimal("0.99")


def test_milk_extends_description():
    decorated = MilkDecorator(Espresso())
    assert decorated.description() == f"{ESPRESSO_DESCRIPTION}, {MILK_DESCRIPTION}"


def test_milk_adds_cost():
    espresso = Espresso()
    decorated = MilkDecorator(espresso)
    assert decorated.cost() == espresso.cost() + MILK_COST


@pytest.mark.parametrize("base_cls", [Espresso, DarkRoast])
def test_double_milk_stacks(base_cls):
    base = base_cls()
    twice = MilkDecorator(MilkDecorator(base))
    assert twice.cost() == base.cost() + 2 * MILK_COST
    assert twice.description().count(MILK_DESCRIPTION) == 2
    assert twice.description().startswith(base.description())


def test_decorator_keeps_wrapped_beverage():
    roast = DarkRoast()
    decorated = MilkDecorator(roast)
    assert decorated.beverage is roast
    assert decorated.cost() == DARK_ROAST_COST + MILK_COST
    assert decorated.description().startswith(DARK_ROAST_DESCRIPTION)


def test_abstract_beverage_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Beverage()


def test_abstract_decorator_cannot_be_instantiated():
    with pytest.raises(TypeError):
        BeverageDecorator(Espresso(), "Nothing")


def test_run_prints_plain_and_decorated(capsys):
    run()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        ESPRESSO_DESCRIPTION,
        str(ESPRESSO_COST),
        f"{ESPRESSO_DESCRIPTION}, {MILK_DESCRIPTION}",
        str(ESPRESSO_COST + MILK_COST),
    ]