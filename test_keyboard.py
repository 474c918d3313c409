import string
import unittest as ut

from errors import LookupFailure, NotAlphabetic, OutOfRange, SymbolError
from keyboard import ALPHABET, ALPHABET_SIZE, Symbol


class SymbolTest(ut.TestCase):
    def test_every_letter_maps_into_alphabet(self):
        for ch in string.ascii_letters:
            sym = Symbol(ch)
            self.assertTrue(0 <= sym.index < ALPHABET_SIZE)
            self.assertEqual(ALPHABET[sym.index], ch.upper())

    def test_case_is_kept_for_display(self):
        sym = Symbol("q")
        self.assertEqual("q", sym.character)
        self.assertEqual("q", str(sym))
        self.assertEqual("Q", sym.upper)
        self.assertEqual(16, sym.index)

    def test_z_is_accepted(self):
        self.assertEqual(25, Symbol("Z").index)

    def test_non_letters_are_rejected(self):
        for bad in ["0", " ", "[", "", "AB", None]:
            with self.assertRaises(NotAlphabetic):
                Symbol(bad)

    def test_letters_outside_a_to_z_are_out_of_range(self):
        for bad in ["é", "ß", "Ж", "ﬆ"]:
            with self.assertRaises(OutOfRange):
                Symbol(bad)

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            Symbol("7")
        try:
            Symbol("7")
        except SymbolError as e:
            self.assertEqual("7", e.character)

    def test_from_index(self):
        self.assertEqual("A", Symbol.from_index(0).character)
        self.assertEqual("Z", Symbol.from_index(25).character)
        with self.assertRaises(LookupFailure):
            Symbol.from_index(26)
        with self.assertRaises(LookupFailure):
            Symbol.from_index(-1)

    def test_symbols_are_immutable(self):
        sym = Symbol("A")
        with self.assertRaises(AttributeError):
            sym.character = "B"


if __name__ == '__main__':
    ut.main()
