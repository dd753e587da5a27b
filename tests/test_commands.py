"""
Tests for command parsing
"""
import unittest

from core.commands import parse_command, KEYWORDS
from models.command import CommandType

CATEGORY_KEYS = ["1", "2", "3", "4", "5"]


class TestParseCommand(unittest.TestCase):
    """Test cases for parse_command"""

    def test_every_keyword_is_recognized(self):
        expected = {
            "start": CommandType.MENU, "menu": CommandType.MENU,
            "categories": CommandType.MENU, "shop": CommandType.MENU,
            "help": CommandType.HELP, "contact": CommandType.CONTACT,
            "cart": CommandType.CART, "clear": CommandType.CLEAR,
            "back": CommandType.BACK, "confirm": CommandType.CONFIRM,
        }
        self.assertEqual(KEYWORDS, expected)
        for word, command_type in expected.items():
            with self.subTest(word=word):
                self.assertEqual(parse_command(word, CATEGORY_KEYS).type, command_type)

    def test_case_and_whitespace_are_ignored(self):
        command = parse_command("  HeLp \n", CATEGORY_KEYS)

        self.assertEqual(command.type, CommandType.HELP)
        self.assertEqual(command.text, "help")

    def test_category_keys(self):
        self.assertEqual(parse_command("3", CATEGORY_KEYS).type, CommandType.SELECT_CATEGORY)
        self.assertEqual(parse_command(" 3 ", CATEGORY_KEYS).text, "3")
        self.assertEqual(parse_command("6", CATEGORY_KEYS).type, CommandType.FREE_TEXT)
        self.assertEqual(parse_command("3", []).type, CommandType.FREE_TEXT)

    def test_free_text(self):
        for text in ["hello", "1 2, 3 500g", "", "confirm order"]:
            with self.subTest(text=text):
                self.assertEqual(parse_command(text, CATEGORY_KEYS).type, CommandType.FREE_TEXT)

    def test_free_text_is_normalized(self):
        self.assertEqual(parse_command(" 1 500G ", CATEGORY_KEYS).text, "1 500g")


if __name__ == '__main__':
    unittest.main()
