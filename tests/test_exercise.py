from workoutapi.exercise import Item, Player

SWORD = Item(name="Sword", type="weapon")
POTION = Item(name="Elixir", type="potion")


def test_pick_up_appends_and_announces(capsys):
    player = Player(name="Alice")
    player.pick_up_item(SWORD)
    player.pick_up_item(POTION)
    assert player.inventory == [SWORD, POTION]
    assert capsys.readouterr().out == "Alice picked up Sword!\nAlice picked up Elixir!\n"


def test_drop_removes_first_match(capsys):
    player = Player(name="Alice", inventory=[SWORD, POTION, SWORD])
    assert player.drop_item("Sword") is True
    assert player.inventory == [POTION, SWORD]
    assert capsys.readouterr().out == "Alice dropped Sword.\n"


def test_drop_missing_is_silent(capsys):
    player = Player(name="Alice", inventory=[SWORD])
    assert player.drop_item("Shield") is False
    assert player.inventory == [SWORD]
    assert capsys.readouterr().out == ""


def test_use_potion_consumes_it(capsys):
    player = Player(name="Bob", inventory=[SWORD, POTION])
    assert player.use_item("Elixir") is True
    assert player.inventory == [SWORD]
    assert capsys.readouterr().out == "Bob used Elixir and feels rejuvenated!\n"


def test_use_non_potion_keeps_it(capsys):
    player = Player(name="Bob", inventory=[SWORD])
    assert player.use_item("Sword") is True
    assert player.inventory == [SWORD]
    assert capsys.readouterr().out == "Bob used Sword.\n"


def test_use_missing_reports(capsys):
    player = Player(name="Bob")
    assert player.use_item("Sword") is False
    assert capsys.readouterr().out == "Bob does not have Sword in inventory.\n"