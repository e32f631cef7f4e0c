"""Template Method - a fixed beverage recipe with overridable steps."""

from abc import ABC, abstractmethod
from typing import List, final


class BeverageRecipe(ABC):
    """
    ``prepare`` runs the same ordered steps for every beverage: boil water,
    brew, pour, add condiments, serve. Only ``brew`` and the optional
    ``add_condiments`` hook vary.
    """

    name = "beverage"

    @final
    def prepare(self) -> List[str]:
        """Run the recipe and return the steps performed, in order."""
        steps = [self.boil_water(), self.brew(), self.pour_in_cup()]
        condiments = self.add_condiments()
        if condiments:
            steps.append(condiments)
        steps.append(self.serve())
        return steps

    def boil_water(self) -> str:
        return "Boiling water"

    @abstractmethod
    def brew(self) -> str:
        pass

    def pour_in_cup(self) -> str:
        return "Pouring into cup"

    def add_condiments(self) -> str:
        """Hook; empty means no condiment step."""
        return ""

    def serve(self) -> str:
        return f"Serving {self.name}"


class Tea(BeverageRecipe):
    name = "tea"

    def brew(self) -> str:
        return "Steeping the tea"

    def add_condiments(self) -> str:
        return "Adding lemon"


class Coffee(BeverageRecipe):
    name = "coffee"

    def brew(self) -> str:
        return "Dripping coffee through filter"

    def add_condiments(self) -> str:
        return "Adding sugar and milk"


class BlackCoffee(Coffee):
    name = "black coffee"

    def add_condiments(self) -> str:
        return ""
