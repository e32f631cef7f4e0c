"""Tests for the beverage template method."""

from patternkit.behavioral.template import BeverageRecipe, BlackCoffee, Coffee, Tea


def test_tea_recipe():
    assert Tea().prepare() == [
        "Boiling water",
        "Steeping the tea",
        "Pouring into cup",
        "Adding lemon",
        "Serving tea",
    ]


def test_coffee_recipe():
    steps = Coffee().prepare()
    assert steps[1] == "Dripping coffee through filter"
    assert steps[-1] == "Serving coffee"


def test_hook_can_skip_condiments():
    assert BlackCoffee().prepare() == [
        "Boiling water",
        "Dripping coffee through filter",
        "Pouring into cup",
        "Serving black coffee",
    ]


def test_fixed_steps_shared_by_all_variants():
    for recipe in (Tea(), Coffee(), BlackCoffee()):
        steps = recipe.prepare()
        assert steps[0] == "Boiling water"
        assert steps[2] == "Pouring into cup"
        assert steps[-1].startswith("Serving")


def test_custom_variant_only_supplies_brew():
    class HotWater(BeverageRecipe):
        name = "hot water"

        def brew(self):
            return "Nothing to brew"

    assert HotWater().prepare() == [
        "Boiling water",
        "Nothing to brew",
        "Pouring into cup",
        "Serving hot water",
    ]
