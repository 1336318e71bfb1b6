import unittest
from healthyliving.domain.Recipe import Recipe
from healthyliving.domain.Recipe_Book import RecipeBook
from healthyliving.domain.exceptions import DuplicateNameError, EmptyFieldError, RecipeBookError


class TestRecipeBook(unittest.TestCase):

    def setUp(self):
        self.book = RecipeBook()

    def test_add_trims_name_and_url(self):
        recipe = self.book.add(" Kale Salad ", "  https://img/kale.png ")
        self.assertEqual(recipe, Recipe("Kale Salad", "https://img/kale.png"))
        self.assertEqual(self.book.find("kale salad").name, "Kale Salad")

    def test_add_rejects_empty_fields(self):
        with self.assertRaises(EmptyFieldError):
            self.book.add("", "https://x")
        with self.assertRaises(EmptyFieldError):
            self.book.add("x", "")
        with self.assertRaises(EmptyFieldError):
            self.book.add("   ", "https://x")
        self.assertEqual(len(self.book), 0)

    def test_duplicate_name_is_case_insensitive(self):
        self.book.add("Tea", "https://t")
        with self.assertRaises(DuplicateNameError):
            self.book.add("tEA", "https://u")
        self.assertEqual(self.book.get_items(), [Recipe("Tea", "https://t")])

    def test_same_name_any_url_leaves_book_unchanged(self):
        self.book.add("Soup", "https://a")
        before = self.book.get_items()
        with self.assertRaises(RecipeBookError):
            self.book.add("Soup", "https://b")
        self.assertEqual(self.book.get_items(), before)

    def test_empty_check_runs_before_duplicate_check(self):
        self.book.add("Tea", "https://t")
        with self.assertRaises(EmptyFieldError):
            self.book.add("Tea", " ")

    def test_non_https_url_is_accepted_by_the_book(self):
        recipe = self.book.add("Soup", "http://a")
        self.assertIn(recipe, self.book)

    def test_no_duplicates_after_many_adds(self):
        names = ["Tea", "tea", "TEA", "Soup", "soup ", " Pie", "pie", "Kale"]
        for n in names:
            try:
                self.book.add(n, "https://x")
            except DuplicateNameError:
                pass
        keys = [r.key for r in self.book]
        self.assertEqual(len(keys), len(set(keys)))
        self.assertEqual([r.name for r in self.book], ["Tea", "Soup", "Pie", "Kale"])

    def test_remove_keeps_insertion_order(self):
        a = self.book.add("A", "https://a")
        b = self.book.add("B", "https://b")
        c = self.book.add("C", "https://c")
        self.book.remove(b)
        self.assertEqual(self.book.get_items(), [a, c])
        d = self.book.add("D", "https://d")
        self.assertEqual(self.book.get_items(), [a, c, d])

    def test_remove_missing_recipe_is_noop(self):
        a = self.book.add("A", "https://a")
        self.book.remove(Recipe("Ghost", "https://g"))
        self.book.remove(a)
        self.book.remove(a)
        self.assertEqual(len(self.book), 0)

    def test_get_items_returns_copy(self):
        self.book.add("A", "https://a")
        items = self.book.get_items()
        items.clear()
        self.assertEqual(len(self.book), 1)


if __name__ == '__main__':
    unittest.main()
