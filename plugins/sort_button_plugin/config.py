"""
plugins/sort_button_plugin/config.py
Default configuration for the Sort Button plugin.
"""

_SUPPORTED_PREFABS = [
    "assets/content/vehicles/boats/rhib/subents/rhib_storage.prefab",
    "assets/content/vehicles/boats/rowboat/subents/rowboat_storage.prefab",
    "assets/content/vehicles/modularcar/subents/modular_car_1mod_storage.prefab",
    "assets/content/vehicles/modularcar/subents/modular_car_camper_storage.prefab",
    "assets/content/vehicles/snowmobiles/subents/snowmobileitemstorage.prefab",
    "assets/content/vehicles/submarine/subents/submarineitemstorage.prefab",
    "assets/prefabs/deployable/composter/composter.prefab",
    "assets/prefabs/deployable/dropbox/dropbox.deployed.prefab",
    "assets/prefabs/deployable/fridge/fridge.deployed.prefab",
    "assets/prefabs/deployable/hitch & trough/hitchtrough.deployed.prefab",
    "assets/prefabs/deployable/hot air balloon/subents/hab_storage.prefab",
    "assets/prefabs/deployable/large wood storage/box.wooden.large.prefab",
    "assets/prefabs/deployable/small stash/small_stash_deployed.prefab",
    "assets/prefabs/deployable/tool cupboard/cupboard.tool.deployed.prefab",
    "assets/prefabs/deployable/vendingmachine/vendingmachine.deployed.prefab",
    "assets/prefabs/deployable/woodenbox/woodbox_deployed.prefab",
    "assets/prefabs/misc/halloween/coffin/coffinstorage.prefab",
]

DEFAULT_CONFIG = {
    # Preference defaults for players who never used a command
    "default_enabled": True,
    "default_sort_by_category": True,

    # Containers owned by someone else can only be sorted by their allies
    "check_ownership": True,
    "use_clans": True,
    "use_friends": True,
    "use_teams": True,

    # Chat command names; the first one is shown in help
    "commands": ["sortbutton"],

    # Supported container types and the X offset of their button
    "containers_by_prefab_name": {
        prefab: {"enabled": True, "offset_x": 476.5} for prefab in _SUPPORTED_PREFABS
    },
    "containers_by_skin_id": {},
}
