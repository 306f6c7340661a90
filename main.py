import argparse
import os
import tempfile

from sortbutton.config import PERMISSION_USE, PLUGIN_DATA_DIR, LOG_LEVEL_NAME
from sortbutton.core.game_server import GameServer
from sortbutton.items.container import ItemContainer
from sortbutton.utils.logger import Logger, LogLevel

DEMO_BOX_PREFAB = "assets/prefabs/deployable/woodenbox/woodbox_deployed.prefab"
DEMO_CONTENTS = {
    "capacity": 12,
    "items": [
        {"display_name": "Wood", "category": "RESOURCES", "amount": 500, "position": 0},
        {"display_name": "Rock", "category": "MISC", "amount": 1, "position": 3},
        {"display_name": "Wood", "category": "RESOURCES", "amount": 200, "position": 4},
        {"display_name": "Bandage", "category": "MEDICAL", "amount": 3, "position": 7},
        {"display_name": "Pistol Bullet", "category": "AMMUNITION", "amount": 64, "position": 9},
        {"display_name": "Apple", "category": "FOOD", "amount": 2, "position": 11},
    ],
}


def main():
    parser = argparse.ArgumentParser(description='Sort Button demo session')
    parser.add_argument('--config-dir', '-c', type=str, default=None,
                        help=f'Plugin config/data directory (default: a temporary directory; game uses {PLUGIN_DATA_DIR})')
    parser.add_argument('--log-level', type=str, default=LOG_LEVEL_NAME,
                        help='DEBUG, INFO, WARN or ERROR')
    args = parser.parse_args()

    Logger.set_level(LogLevel.from_name(args.log_level))
    if args.config_dir:
        os.makedirs(args.config_dir, exist_ok=True)
        run_demo(args.config_dir)
    else:
        with tempfile.TemporaryDirectory() as config_dir:
            run_demo(config_dir)


def run_demo(config_dir: str) -> list:
    """Opens a box, sorts it by category, switches to name order and sorts again."""
    server = GameServer(config_dir=config_dir)
    server.world.string_pool.register(DEMO_BOX_PREFAB)
    server.start(["sort_button_plugin"])

    player = server.connect_player(1, "Demo", permissions={PERMISSION_USE})
    box = server.world.spawn_entity(DEMO_BOX_PREFAB, 0, panel_name="generic_resizable")
    box.inventory = ItemContainer.from_dict(DEMO_CONTENTS, entity_owner=box)

    server.open_loot(player, box)
    server.tick()

    orders = []
    for label in ("category", "name"):
        server.process_command(player, "sortbutton.sort")
        order = [f"{item.display_name} x{item.amount}" for item in box.inventory.items_by_position()]
        print(f"Sorted by {label}: {', '.join(order)}")
        orders.append(order)
        server.process_command(player, "sortbutton.order")

    server.close_loot(player)
    server.shutdown()
    return orders


if __name__ == "__main__":
    main()
