import pytest

from sqid_codec.core.errors import ConfigError
from sqid_codec.services.codec import SqidsCodec
from sqid_codec.utils.encoding import DEFAULT_ALPHABET, shuffle


def test_custom_alphabet(custom_codec):
    """Test encoding with a caller-supplied alphabet."""
    assert custom_codec.encode([1, 2, 3]) == "1x3gd2"
    assert custom_codec.decode("1x3gd2") == [1, 2, 3]


def test_working_alphabet_is_shuffled_once():
    """Test that the working alphabet is the supplied one shuffled once."""
    codec = SqidsCodec(alphabet="abcdefgh")
    assert codec.alphabet == shuffle("abcdefgh")


def test_empty_alphabet_uses_default():
    """Test that an empty or missing alphabet falls back to the default."""
    assert SqidsCodec(alphabet="").alphabet == SqidsCodec().alphabet
    assert SqidsCodec(alphabet=None).alphabet == shuffle(DEFAULT_ALPHABET)


def test_short_alphabet_round_trip(sample_numbers):
    """Test round-trips with the smallest allowed alphabet."""
    codec = SqidsCodec(alphabet="abcde")
    for numbers in sample_numbers:
        assert codec.decode(codec.encode(numbers)) == numbers


def test_long_alphabet_round_trip(sample_numbers):
    """Test round-trips with an alphabet longer than the default."""
    codec = SqidsCodec(alphabet=DEFAULT_ALPHABET + "_-~!@#$%^&*()+={}[];:,.<>/?|")
    for numbers in sample_numbers:
        assert codec.decode(codec.encode(numbers)) == numbers


def test_non_ascii_alphabet_round_trip(sample_numbers):
    """Test round-trips with a non-ASCII alphabet."""
    codec = SqidsCodec(alphabet="äöüßéèçñøåæœ€ΩΔπ", blocklist=[])
    for numbers in sample_numbers:
        id_ = codec.encode(numbers)
        assert set(id_) <= set(codec.alphabet)
        assert codec.decode(id_) == numbers


def test_ids_use_only_alphabet_characters(custom_codec):
    """Test that IDs only contain alphabet characters."""
    for n in range(0, 500):
        assert set(custom_codec.encode([n, n * 7])) <= set("acd123efgzxy")


def test_alphabet_too_short():
    """Test that an alphabet under five characters is rejected."""
    with pytest.raises(ConfigError, match="at least 5"):
        SqidsCodec(alphabet="abcd")


def test_alphabet_repeated_characters():
    """Test that an alphabet with repeated characters is rejected."""
    with pytest.raises(ConfigError, match="unique characters"):
        SqidsCodec(alphabet="aabcdefg")


def test_alphabet_wrong_type():
    """Test that a non-string alphabet is rejected."""
    with pytest.raises(ConfigError):
        SqidsCodec(alphabet=12345)
