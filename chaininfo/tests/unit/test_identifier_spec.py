# chaininfo/tests/unit/test_identifier_spec.py

import sys
import os
import unittest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from chaininfo.core.models.identifier_spec import (
    HashLookup, IdentifierSpec, SequenceLookup, parse_search
)

def _offset_from_100(height: int) -> int:
    return max(100 + height + 1, 1)

class TestIdentifierSpec(unittest.TestCase):

    def test_parse_search(self):
        self.assertEqual(parse_search(" 42 "), 42)
        self.assertEqual(parse_search("-3"), -3)
        self.assertEqual(parse_search("+7"), 7)
        self.assertEqual(parse_search("abc123"), "abc123")
        # Solo enteros decimales: ni floats ni separadores
        self.assertEqual(parse_search("1.5"), "1.5")
        self.assertEqual(parse_search("1_000"), "1_000")
        self.assertEqual(parse_search("1e3"), "1e3")

    def test_parse_search_ascii_digits_only(self):
        # Dígitos no ASCII (árabe-índicos) se tratan como hash
        self.assertEqual(parse_search("\u0663"), "\u0663")
        self.assertEqual(parse_search("1\u0663"), "1\u0663")

    def test_parse_search_blank_is_zero(self):
        self.assertEqual(parse_search(""), 0)
        self.assertEqual(parse_search("   "), 0)

    def test_expanded_blank_search(self):
        spec = IdentifierSpec(search="  ", hash="aa", height=5).expanded()
        self.assertEqual(spec, IdentifierSpec(hash="aa", height=0))

    def test_expanded_numeric_search(self):
        spec = IdentifierSpec(search="12", hash="aa", height=5).expanded()
        self.assertEqual(spec, IdentifierSpec(hash="aa", height=12))

    def test_expanded_text_search(self):
        spec = IdentifierSpec(search=" ff00 ", height=5).expanded()
        self.assertEqual(spec, IdentifierSpec(hash="ff00", height=5))

    def test_lookup_order_hash_then_height(self):
        plan = IdentifierSpec(hash="ff", height=-1).lookups(_offset_from_100)
        self.assertEqual(plan, [HashLookup("ff"), SequenceLookup(100)])

    def test_zero_height_produces_no_lookup(self):
        self.assertEqual(IdentifierSpec(height=0).lookups(_offset_from_100), [])
        self.assertEqual(IdentifierSpec().lookups(_offset_from_100), [])

    def test_normalize_not_called_for_hash_only(self):
        calls = []
        IdentifierSpec(hash="ff").lookups(lambda h: calls.append(h) or h)
        self.assertEqual(calls, [])

    def test_not_found_messages(self):
        self.assertEqual(HashLookup("beef").not_found().message, "No block found with hash beef")
        self.assertEqual(SequenceLookup(9).not_found().message, "No block found with sequence 9")

if __name__ == "__main__":
    unittest.main()
