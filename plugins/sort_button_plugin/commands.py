"""
plugins/sort_button_plugin/commands.py
Command module for the Sort Button plugin.
"""
from sortbutton.config import UI_COMMAND_SORT, UI_COMMAND_ORDER
from plugins.plugin_system import register_plugin_command

def register_commands(plugin):
    """Register the chat command(s) and the two button commands."""

    def sort_button_command_handler(args, context):
        """Toggle the button, or with 'sort'/'type' toggle the sort mode."""
        player = context.get("player")
        if player is None:
            return ""
        return plugin.cmd_sort_button(player, args)

    def order_button_handler(args, context):
        """Clicked the C/N toggle next to the button."""
        player = context.get("player")
        if player is not None:
            plugin.toggle_sort_order(player)
        return ""

    def sort_button_handler(args, context):
        """Clicked the sort button."""
        player = context.get("player")
        if player is not None:
            plugin.sort_looted_container(player)
        return ""

    for name in plugin.config["commands"]:
        register_plugin_command(
            plugin.plugin_id,
            name,
            sort_button_command_handler,
            category="inventory",
            help_text="Enable/disable the sort button, or change the sort type with 'sort'."
        )

    register_plugin_command(
        plugin.plugin_id,
        UI_COMMAND_ORDER,
        order_button_handler,
        category="ui",
        help_text="Switch between sorting by category and by name."
    )
    register_plugin_command(
        plugin.plugin_id,
        UI_COMMAND_SORT,
        sort_button_handler,
        category="ui",
        help_text="Sort the container you are looting."
    )
