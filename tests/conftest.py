"""Shared fixtures for the inventory console tests."""

import builtins
from typing import Callable, List

import pytest

from inventory import Inventory, Item


@pytest.fixture
def scripted_input(monkeypatch) -> Callable[..., List[str]]:
    """
    Replace ``input()`` with a fixed list of answers.

    Returns a function taking the answers; the list it returns collects every
    prompt that was shown. Running out of answers raises EOFError, the same as
    a closed stdin.
    """
    def install(*answers: str) -> List[str]:
        remaining = iter(answers)
        prompts: List[str] = []

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr(builtins, "input", fake_input)
        return prompts

    return install


@pytest.fixture
def widget() -> Item:
    return Item.product("A001", "Widget", 9.99, "Metal", "Acme", 10)


@pytest.fixture
def inventory(widget: Item) -> Inventory:
    inv = Inventory()
    inv.add_item(widget)
    inv.add_item(Item("B002", "Bolt", 0.5, 200))
    return inv
