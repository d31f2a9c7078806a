"""Tests for Caesar cipher engine."""

import pytest

from cipher_suite.core.exceptions import InvalidKeyError
from cipher_suite.services.engines.monoalphabetic.caesar import CaesarEngine, CaesarKey


class TestCaesarKey:
    """Test suite for Caesar key normalization."""

    @pytest.mark.parametrize(
        "raw, expected",
        [(0, 0), (3, 3), (25, 25), (26, 0), (29, 3), (-1, 25), (-27, 25), (-52, 0), (1000, 12)],
    )
    def test_from_raw_wraps(self, raw, expected):
        assert CaesarKey.from_raw(raw).shift == expected

    def test_from_raw_parses_strings(self):
        assert CaesarKey.from_raw("7").shift == 7
        assert CaesarKey.from_raw(" -3 ").shift == 23

    @pytest.mark.parametrize("raw", ["abc", "", "3.5", 2.0, None, True])
    def test_from_raw_rejects_non_integers(self, raw):
        with pytest.raises(InvalidKeyError):
            CaesarKey.from_raw(raw)

    def test_key_is_immutable(self):
        key = CaesarKey.from_raw(5)
        with pytest.raises(AttributeError):
            key.shift = 6


class TestCaesarEngine:
    """Test suite for Caesar cipher engine."""

    @pytest.fixture
    def engine(self):
        return CaesarEngine()

    def _encrypt(self, engine, message, key):
        engine.set_key(key)
        engine.set_message(message)
        engine.encrypt()
        return engine.get_result()

    def _decrypt(self, engine, message, key):
        engine.set_key(key)
        engine.set_message(message)
        engine.decrypt()
        return engine.get_result()

    def test_encrypt_hello_world(self, engine):
        """Test the classic shift of 3, keeping case and punctuation."""
        assert self._encrypt(engine, "Hello, World!", 3) == "Khoor, Zruog!"

    def test_decrypt_hello_world(self, engine):
        assert self._decrypt(engine, "Khoor, Zruog!", 3) == "Hello, World!"

    def test_encrypt_shift_7(self, engine):
        """Test specific encryption with shift 7."""
        assert self._encrypt(engine, "HELLO", 7) == "OLSSV"

    def test_wraps_end_of_alphabet(self, engine):
        assert self._encrypt(engine, "xyz XYZ", 3) == "abc ABC"
        assert self._decrypt(engine, "abc ABC", 3) == "xyz XYZ"

    def test_encrypt_decrypt_roundtrip(self, engine):
        """Test that encrypt followed by decrypt returns original for any key."""
        message = "The quick brown fox jumps over the lazy dog! 0123 ~{}"
        for key in range(-60, 61):
            ciphertext = self._encrypt(engine, message, key)
            assert self._decrypt(engine, ciphertext, key) == message

    def test_key_equivalence_modulo_26(self, engine):
        message = "Attack at Dawn"
        for key in (-5, 0, 4, 19):
            expected = self._encrypt(engine, message, key)
            for n in (-3, -1, 1, 2, 10):
                assert self._encrypt(CaesarEngine(), message, key + 26 * n) == expected

    def test_non_letters_unchanged(self, engine):
        message = "12:30, 7th May -> é!"
        ciphertext = self._encrypt(engine, message, 11)
        assert len(ciphertext) == len(message)
        for original, produced in zip(message, ciphertext):
            if not (original.isascii() and original.isalpha()):
                assert produced == original

    def test_result_is_replaced_not_appended(self, engine):
        engine.set_key(1)
        engine.set_message("abc")
        engine.encrypt()
        engine.encrypt()
        assert engine.get_result() == "bcd"

    def test_result_empty_before_any_call(self, engine):
        assert engine.get_result() == ""

    def test_missing_key_raises(self, engine):
        engine.set_message("abc")
        with pytest.raises(InvalidKeyError):
            engine.encrypt()
        assert engine.get_result() == ""

    def test_constructor_key(self):
        engine = CaesarEngine(key=-1)
        assert engine.key == CaesarKey(25)
        assert engine.key_repr() == "25"

    def test_generate_random_key(self, engine):
        """Test random key generation."""
        for _ in range(100):
            shift = int(engine.generate_random_key())
            assert 1 <= shift <= 25  # Excludes 0 (no encryption)

    def test_explain(self, engine):
        """Test explanation generation."""
        engine.set_key(7)
        explanation = engine.explain("HELLO", "OLSSV")

        assert "7" in explanation
        assert "shift" in explanation.lower()

    def test_explain_uses_first_letter(self, engine):
        engine.set_key(3)
        explanation = engine.explain("1 abc", "1 def")

        assert "'a' becomes 'd'" in explanation
        assert "'1' becomes" not in explanation

    def test_explain_without_letters(self, engine):
        engine.set_key(3)
        assert "For example" not in engine.explain("2024!", "2024!")


class TestCaesarKeyLimits:
    """Test suite for oversized Caesar keys."""

    def test_overlong_numeric_key_rejected(self):
        with pytest.raises(InvalidKeyError) as exc_info:
            CaesarKey.from_raw("9" * 5000)

        assert len(exc_info.value.message) < 100
        assert exc_info.value.details["length"] == 5000
        assert len(exc_info.value.details["key"]) <= 23

    def test_longest_accepted_key(self):
        assert CaesarKey.from_raw("1" + "0" * 63).shift == (10 ** 63) % 26

    def test_rejected_key_is_truncated_in_message(self):
        with pytest.raises(InvalidKeyError) as exc_info:
            CaesarKey.from_raw("x" * 40)

        assert "x" * 21 not in exc_info.value.message
        assert exc_info.value.details["key"] == "x" * 20 + "..."
