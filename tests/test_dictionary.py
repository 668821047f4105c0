import tempfile
import unittest
from pathlib import Path

from honeycomb.core.exceptions import InputUnavailableError
from honeycomb.data.dictionary import DictionaryConfig, WordList
from honeycomb.data.normalization import clean_word, fold_letters


class DictionaryTests(unittest.TestCase):
    def test_clean_word_folds_diacritics(self) -> None:
        self.assertEqual(clean_word("ăâîșț"), "AAIST")
        self.assertEqual(clean_word("bee-hive 2"), "BEEHIVE")
        self.assertEqual(clean_word(""), "")

    def test_fold_letters_keeps_one_character_per_cell(self) -> None:
        self.assertEqual(fold_letters("bc-d\u00e9fg"), "BC-DEFG")
        self.assertEqual(fold_letters("\u0219a\u021b"), "SAT")
        self.assertEqual(fold_letters("\u00df"), "\u00df")
        self.assertEqual(len(fold_letters("a b\u00dfc")), 5)

    def test_blank_lines_are_dropped_and_order_kept(self) -> None:
        words = WordList.from_lines(["BC", "", "  AB\r", "   ", "ZED"])
        self.assertEqual(words.words, ("BC", "AB", "ZED"))
        self.assertEqual(len(words), 3)
        self.assertIn("AB", words)

    def test_comments_are_kept_unless_skipped(self) -> None:
        lines = ["#NOTE", "AB"]
        self.assertEqual(WordList.from_lines(lines).words, ("#NOTE", "AB"))
        self.assertEqual(WordList.from_lines(lines, skip_comments=True).words, ("AB",))

    def test_normalize_and_min_length(self) -> None:
        words = WordList.from_lines(["ab", "c", "--", "Éclat"], normalize=True, min_length=2)
        self.assertEqual(list(words), ["AB", "ECLAT"])

    def test_case_is_preserved_without_normalize(self) -> None:
        self.assertEqual(WordList.from_lines(["ab"]).words, ("ab",))

    def test_from_config_reads_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "dictionary.txt"
            sample.write_text("AB\nABG\n\nAH\nBC\n", encoding="utf-8")
            words = WordList.from_config(DictionaryConfig(path=sample))
            self.assertEqual(words.words, ("AB", "ABG", "AH", "BC"))

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(InputUnavailableError):
                WordList.from_config(DictionaryConfig(path=Path(tmpdir) / "missing.txt"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
