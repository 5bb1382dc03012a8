"""
Builder: a director runs a fixed sequence of construction steps while an
interchangeable builder decides what each step adds to the burger.
"""

from abc import ABC, abstractmethod
from typing import List


class Ingredient(ABC):
    allergens: List[str] = []

    @property
    @abstractmethod
    def name(self) -> str: ...


class RegularBun(Ingredient):
    name, allergens = "Regular bun", ["wheat"]


class BigMacBun(Ingredient):
    name, allergens = "Big Mac bun", ["wheat", "sesame"]


class BeefPatty(Ingredient):
    name = "Beef patty"


class Cheese(Ingredient):
    name, allergens = "Cheese", ["milk", "soy"]


class Ketchup(Ingredient):
    name = "Ketchup"


class Mustard(Ingredient):
    name, allergens = "Mustard", ["mustard"]


class BigMacSauce(Ingredient):
    name, allergens = "Big Mac sauce", ["egg", "milk", "mustard", "soy"]


class GrillSeasoning(Ingredient):
    name = "Grill seasoning"


class Onions(Ingredient):
    name = "Onions"


class PickleSlices(Ingredient):
    name = "Pickle slices"


class ShreddedLettuce(Ingredient):
    name = "Shredded lettuce"


class Burger:
    def __init__(self, name: str, price: float):
        self.name = name
        self.price = price
        self.ingredients: List[Ingredient] = []

    def add(self, *ingredients: Ingredient) -> None:
        self.ingredients.extend(ingredients)

    def format_ingredients(self) -> str:
        return ", ".join(i.name for i in self.ingredients)

    def format_allergens(self) -> str:
        allergens = sorted({a for i in self.ingredients for a in i.allergens})
        return ", ".join(allergens) or "none"

    def format_price(self) -> str:
        return f"${self.price:.2f}"


class BurgerBuilderBase(ABC):
    name = "Burger"
    price = 0.0

    def __init__(self):
        self.burger: Burger | None = None

    def create_burger(self) -> None:
        self.burger = Burger(self.name, self.price)

    def get_burger(self) -> Burger:
        if self.burger is None:
            raise RuntimeError("No burger yet, call prepare_burger() first")
        return self.burger

    @abstractmethod
    def add_buns(self) -> None: ...

    @abstractmethod
    def add_cheese(self) -> None: ...

    @abstractmethod
    def add_patties(self) -> None: ...

    @abstractmethod
    def add_sauces(self) -> None: ...

    @abstractmethod
    def add_seasoning(self) -> None: ...

    @abstractmethod
    def add_vegetables(self) -> None: ...


class HamburgerBuilder(BurgerBuilderBase):
    name, price = "Hamburger", 1.00

    def add_buns(self):
        self.burger.add(RegularBun())

    def add_cheese(self):
        pass

    def add_patties(self):
        self.burger.add(BeefPatty())

    def add_sauces(self):
        self.burger.add(Ketchup(), Mustard())

    def add_seasoning(self):
        self.burger.add(GrillSeasoning())

    def add_vegetables(self):
        self.burger.add(Onions(), PickleSlices())


class CheeseburgerBuilder(HamburgerBuilder):
    name, price = "Cheeseburger", 1.09

    def add_cheese(self):
        self.burger.add(Cheese())


class BigMacBuilder(CheeseburgerBuilder):
    name, price = "Big Mac", 3.99

    def add_buns(self):
        self.burger.add(BigMacBun())

    def add_patties(self):
        self.burger.add(BeefPatty(), BeefPatty())

    def add_sauces(self):
        self.burger.add(BigMacSauce())

    def add_vegetables(self):
        self.burger.add(Onions(), PickleSlices(), ShreddedLettuce())


class BurgerMaker:
    """The director."""

    def __init__(self, builder: BurgerBuilderBase):
        self.builder = builder

    def change_builder(self, builder: BurgerBuilderBase) -> None:
        self.builder = builder

    def prepare_burger(self) -> None:
        self.builder.create_burger()
        self.builder.add_buns()
        self.builder.add_cheese()
        self.builder.add_patties()
        self.builder.add_sauces()
        self.builder.add_seasoning()
        self.builder.add_vegetables()

    def get_burger(self) -> Burger:
        return self.builder.get_burger()


def main():
    maker = BurgerMaker(HamburgerBuilder())
    builders = [HamburgerBuilder(), CheeseburgerBuilder(), BigMacBuilder()]

    for index, builder in enumerate(builders):
        maker.change_builder(builder)
        maker.prepare_burger()
        burger = maker.get_burger()
        if index:
            print()
        print(f"{burger.name}: {burger.format_ingredients()}")
        print(f"Allergens: {burger.format_allergens()}")
        print(f"Price: {burger.format_price()}")


if __name__ == "__main__":
    main()
