"""A small inventory model for a game player."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Item:
    name: str
    type: str


@dataclass
class Player:
    name: str
    inventory: list[Item] = field(default_factory=list)

    def _find(self, item_name: str) -> int | None:
        return next(
            (index for index, item in enumerate(self.inventory) if item.name == item_name),
            None,
        )

    def pick_up_item(self, item: Item) -> None:
        """Add an item to the end of the inventory."""
        self.inventory.append(item)
        print(f"{self.name} picked up {item.name}!")

    def drop_item(self, item_name: str) -> bool:
        """Remove the first item with that name; return whether one was found."""
        index = self._find(item_name)
        if index is None:
            return False
        del self.inventory[index]
        print(f"{self.name} dropped {item_name}.")
        return True

    def use_item(self, item_name: str) -> bool:
        """Use the first item with that name; potions are consumed."""
        index = self._find(item_name)
        if index is None:
            print(f"{self.name} does not have {item_name} in inventory.")
            return False
        if self.inventory[index].type == "potion":
            print(f"{self.name} used {item_name} and feels rejuvenated!")
            del self.inventory[index]
        else:
            print(f"{self.name} used {item_name}.")
        return True