import unittest

import pygame

from tests.fixtures import PROJECT_ROOT  # noqa: F401
from sortbutton.config import (
    UI_PANEL_NAME, UI_COMMAND_ORDER, UI_COMMAND_SORT, ORDER_COLOR_CATEGORY, ORDER_COLOR_NAME
)
from sortbutton.sorting.placement import RenderInstruction
from sortbutton.ui.overlay import PygameOverlaySink, parse_color
from sortbutton.ui.sort_button_ui import SortButtonTemplate
from sortbutton.world.player import Player

class TestSortButtonTemplate(unittest.TestCase):

    def setUp(self):
        self.template = SortButtonTemplate()

    def test_template_built_once(self):
        self.assertFalse(self.template.is_cached)
        self.template.render(RenderInstruction(476.5, 236, 23), True, "Sort")
        cached = self.template._cached
        self.template.render(RenderInstruction(0, 174, 21), False, "Sort")
        self.assertIs(self.template._cached, cached)

    def test_values_substituted(self):
        root, order, sort = self.template.render(RenderInstruction(476.5, 236, 23), True, "Sort")

        self.assertEqual(root["name"], UI_PANEL_NAME)
        self.assertEqual(root["offset_min"], "476.5 236")
        self.assertEqual(order["command"], UI_COMMAND_ORDER)
        self.assertEqual(order["text"], "C")
        self.assertEqual(order["color"], ORDER_COLOR_CATEGORY)
        self.assertEqual(order["offset_max"], "17 23")
        self.assertEqual(sort["command"], UI_COMMAND_SORT)
        self.assertEqual(sort["offset_min"], "17 0")
        self.assertEqual(sort["offset_max"], "96 23")
        self.assertEqual(sort["text"], "Sort")

    def test_name_mode(self):
        _, order, sort = self.template.render(RenderInstruction(0, 277, 21), False, "Сортировать")
        self.assertEqual(order["text"], "N")
        self.assertEqual(order["color"], ORDER_COLOR_NAME)
        self.assertEqual(sort["offset_max"], "96 21")
        self.assertEqual(sort["text"], "Сортировать")

    def test_text_is_escaped(self):
        _, _, sort = self.template.render(RenderInstruction(0, 0, 23), True, 'So"rt\\')
        self.assertEqual(sort["text"], 'So"rt\\')

class TestPygameOverlaySink(unittest.TestCase):

    def setUp(self):
        self.sink = PygameOverlaySink(screen_size=(1600, 920))
        self.player = Player(1, "Alice")
        self.elements = SortButtonTemplate().render(RenderInstruction(100, 236, 23), True, "Sort")

    def test_parse_color(self):
        self.assertEqual(parse_color("0.75 0.43 0.18 0.8"), (191, 110, 46, 204))
        self.assertEqual(parse_color("1 0 0"), (255, 0, 0, 255))

    def test_layout_from_bottom_centre(self):
        self.sink.show_overlay(self.player, self.elements)
        buttons = {button.name: button for button in self.sink.buttons_for(1)}

        self.assertEqual(buttons[f"{UI_PANEL_NAME}.order"].rect, pygame.Rect(900, 661, 17, 23))
        self.assertEqual(buttons[f"{UI_PANEL_NAME}.sort"].rect, pygame.Rect(917, 661, 79, 23))

    def test_hit_test(self):
        self.sink.show_overlay(self.player, self.elements)
        self.assertEqual(self.sink.hit_test(1, (905, 670)), UI_COMMAND_ORDER)
        self.assertEqual(self.sink.hit_test(1, (950, 670)), UI_COMMAND_SORT)
        self.assertIsNone(self.sink.hit_test(1, (10, 10)))
        self.assertIsNone(self.sink.hit_test(2, (950, 670)))

    def test_hide_overlay(self):
        self.sink.show_overlay(self.player, self.elements)
        self.assertTrue(self.sink.is_visible(1, UI_PANEL_NAME))
        self.sink.hide_overlay(self.player, UI_PANEL_NAME)
        self.assertFalse(self.sink.is_visible(1))
        self.assertEqual(self.sink.buttons_for(1), [])
        # Hiding again is harmless.
        self.sink.hide_overlay(self.player, UI_PANEL_NAME)

    def test_draw(self):
        self.sink.show_overlay(self.player, self.elements)
        surface = pygame.Surface((1600, 920))

        # The root panel is transparent and zero sized, so only the two buttons draw.
        self.assertEqual(self.sink.draw(surface, 1), 2)
        self.assertEqual(tuple(surface.get_at((901, 662)))[:3], (191, 110, 46))
        self.assertEqual(tuple(surface.get_at((10, 10)))[:3], (0, 0, 0))
