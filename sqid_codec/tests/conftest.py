import pytest

from sqid_codec.services.codec import SqidsCodec


CUSTOM_ALPHABET = "acd123efgzxy"


@pytest.fixture
def codec():
    """Codec with the default alphabet and the built-in blocklist."""
    return SqidsCodec()


@pytest.fixture
def unblocked_codec():
    """Codec with the default alphabet and blocking disabled."""
    return SqidsCodec(blocklist=[])


@pytest.fixture
def custom_codec():
    return SqidsCodec(alphabet=CUSTOM_ALPHABET)


@pytest.fixture
def sample_numbers():
    """Provides number lists of varying shape for round-trip checks."""
    return [
        [0],
        [1],
        [1, 2, 3],
        [0, 0, 0, 0],
        [100, 200, 300],
        [9, 99, 999, 9999, 99999],
        [2 ** 32, 2 ** 40, 2 ** 63],
        [2 ** 64 - 1],
        [5, 4, 3, 2, 1, 0],
    ]
