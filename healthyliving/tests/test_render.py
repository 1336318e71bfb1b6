import unittest
from healthyliving.domain.Input_Stage import InputStage
from healthyliving.domain.Recipe_Book import RecipeBook
from healthyliving.logic.screen.render import render_screen


class TestRenderScreen(unittest.TestCase):

    def setUp(self):
        self.book = RecipeBook()
        self.stage = InputStage()

    def test_inputs_and_submit(self):
        self.stage.set_name_draft("Soup")
        self.stage.set_url_draft("https://a")
        tree = render_screen(self.book, self.stage, "")
        self.assertEqual([i["value"] for i in tree["inputs"]], ["Soup", "https://a"])
        self.assertEqual(tree["inputs"][0]["label"], "Nombre de la receta")
        self.assertEqual(tree["inputs"][1]["label"], "URL de la imagen (https)")
        self.assertEqual(tree["submit"], {"label": "Agregar", "enabled": True})

    def test_blank_status_is_hidden(self):
        self.assertIsNone(render_screen(self.book, self.stage, "   ")["status"])
        self.assertEqual(render_screen(self.book, self.stage, "Receta agregada.")["status"], "Receta agregada.")

    def test_rows_follow_insertion_order(self):
        for name in ("Pie", "Kale Salad", "Tea"):
            self.book.add(name, "https://img/" + name)
        states = {"kale salad": "error", "tea": "ready"}
        tree = render_screen(self.book, self.stage, "", lambda key: states.get(key, "loading"))
        rows = tree["items"]
        self.assertEqual([r["key"] for r in rows], ["pie", "kale salad", "tea"])
        self.assertEqual([r["image"]["state"] for r in rows], ["loading", "error", "ready"])
        kale = rows[1]
        self.assertEqual(kale["image"]["src"], "/images/kale%20salad")
        self.assertEqual(kale["image"]["content_description"], "Kale Salad")
        self.assertEqual(kale["image"]["size"], 80)
        self.assertEqual(kale["title"]["max_lines"], 2)
        self.assertEqual(kale["remove"]["path"], "/api/recipes/kale%20salad")

    def test_render_does_not_mutate_state(self):
        self.book.add("Tea", "https://t")
        self.stage.set_name_draft("x")
        render_screen(self.book, self.stage, "msg")
        self.assertEqual(len(self.book), 1)
        self.assertEqual(self.stage.name_draft, "x")


if __name__ == '__main__':
    unittest.main()
