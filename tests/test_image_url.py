from __future__ import annotations

import unittest

import voluptuous as vol

from cooklang_converter import get_image_url


class ImageURLTests(unittest.TestCase):
    def test_recipe_image(self) -> None:
        self.assertEqual(get_image_url("Baked Potato"), "Baked Potato.png")

    def test_step_image(self) -> None:
        self.assertEqual(
            get_image_url("Baked Potato", step=2, extension="jpg"),
            "Baked Potato.2.jpg",
        )
        self.assertEqual(get_image_url("Baked Potato", step=3), "Baked Potato.3.png")

    def test_extension_only(self) -> None:
        self.assertEqual(get_image_url("Toast", extension="jpg"), "Toast.jpg")

    def test_unknown_extension(self) -> None:
        with self.assertRaises(vol.Invalid):
            get_image_url("Toast", extension="gif")

    def test_step_must_be_integer(self) -> None:
        with self.assertRaises(vol.Invalid):
            get_image_url("Toast", step="2")


if __name__ == "__main__":
    unittest.main()
