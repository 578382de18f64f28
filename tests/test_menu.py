from hero_inventory.items import Potion, Weapon
from hero_inventory.ui.menu import INVALID_INDEX_MESSAGE, MENU_ITEMS, InventoryMenu


def test_menu_lists_every_option(player, scripted_console):
    menu = InventoryMenu(player, scripted_console([]))
    lines = menu.render_menu()
    assert lines[0] == "1) Add weapon"
    assert lines[-1] == "0) Quit"
    assert len(lines) == len(MENU_ITEMS)


def test_full_session_scenario(player, scripted_console):
    console = scripted_console([
        "1", "Sword", "10",
        "3", "Tonic", "5",
        "5", "0",
        "4",
        "5", "1",
        "4",
        "0",
    ])
    menu = InventoryMenu(player, console)

    handled = menu.run()

    assert handled == 7
    assert menu.running is False
    text = console.text
    assert "Added Sword [Weapon] damage: 10" in text
    assert "Added Tonic [Potion] heals: 5" in text
    assert "Hero | HP 100/100 | ATK 15 | DEF 2 | Weapon: Sword | Armor: -" in text
    assert "0: Sword [Weapon] damage: 10 (equipped)" in text
    assert "Used Tonic." in text
    assert console.output[-1] == "Goodbye!"
    # Quitting releases the inventory
    assert player.inventory_size() == 0


def test_add_reprompts_for_out_of_range_stats(player, scripted_console):
    console = scripted_console(["2", "Mail", "-3", "4", "3", "Tonic", "0", "5"])
    menu = InventoryMenu(player, console)
    assert menu.handle(console.ask("> ")) is True
    assert menu.handle(console.ask("> ")) is True
    assert [item.describe() for item in player.items()] == [
        "Mail [Armor] defense: 4",
        "Tonic [Potion] heals: 5",
    ]
    assert "Please enter a number >= 0." in console.output
    assert "Please enter a number >= 1." in console.output


def test_invalid_index_is_reported(player, scripted_console):
    sword = Weapon("Sword", 10)
    player.add_item(sword)
    console = scripted_console(["5", "6", "6", "-1"])
    menu = InventoryMenu(player, console)

    menu.handle(console.ask("> "))
    menu.handle(console.ask("> "))

    assert console.output.count(INVALID_INDEX_MESSAGE) == 2
    assert player.items() == (sword,)
    assert not sword.is_equipped()


def test_remove_item(player, scripted_console):
    player.add_item(Potion("Tonic", 5))
    player.add_item(Weapon("Sword", 10))
    console = scripted_console(["6", "0"])
    menu = InventoryMenu(player, console)

    menu.handle(console.ask("> "))

    assert "Removed Tonic." in console.output
    assert [item.name for item in player.items()] == ["Sword"]


def test_use_on_empty_inventory_does_not_prompt(player, scripted_console):
    console = scripted_console(["5"])
    menu = InventoryMenu(player, console)
    menu.handle(console.ask("> "))
    assert "Inventory is empty." in console.output
    assert console.prompts == ["> "]


def test_unknown_option(player, scripted_console):
    console = scripted_console(["9", "0"])
    menu = InventoryMenu(player, console)
    assert menu.run() == 1
    assert "Unknown option: '9'" in console.output


def test_end_of_input_quits_and_releases(player, scripted_console):
    player.add_item(Weapon("Sword", 10))
    console = scripted_console(["7"])
    menu = InventoryMenu(player, console)
    assert menu.run() == 1
    assert "Hero | HP 100/100 | ATK 5 | DEF 2 | Weapon: - | Armor: -" in console.output
    assert console.output[-1] == "Goodbye!"
    assert player.inventory_size() == 0
