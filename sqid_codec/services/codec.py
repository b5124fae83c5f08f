import logging
import re
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from sqid_codec.core.config import Settings, settings
from sqid_codec.core.errors import ConfigError, DecodeError, RangeError
from sqid_codec.schemas.options import CodecOptions
from sqid_codec.utils.blocklist import DEFAULT_BLOCKLIST
from sqid_codec.utils.encoding import (
    has_unique_chars,
    rotate,
    shuffle,
    to_id,
    to_number,
)

logger = logging.getLogger(__name__)

MIN_VALUE = 0
MAX_VALUE = 2 ** 64 - 1

MIN_ALPHABET_LENGTH = 5
MIN_BLOCKLIST_WORD_LENGTH = 3

_DIGIT_RE = re.compile(r"[0-9]")


class SqidsCodec:
    """Encodes lists of non-negative integers into short IDs and back.

    The configuration is fixed at construction, so one instance can be shared
    freely between callers.
    """

    def __init__(self, alphabet: str = "", min_length: int = 0, blocklist: Optional[Iterable[str]] = None):
        try:
            options = CodecOptions(alphabet=alphabet, min_length=min_length, blocklist=blocklist)
        except ValidationError as e:
            raise ConfigError(f"invalid codec options: {e}") from e
        self._configure(options)

    @classmethod
    def from_options(cls, options: CodecOptions) -> "SqidsCodec":
        return cls(alphabet=options.alphabet, min_length=options.min_length, blocklist=options.blocklist)

    @classmethod
    def from_settings(cls, config: Settings) -> "SqidsCodec":
        try:
            options = CodecOptions.from_settings(config)
        except ValidationError as e:
            raise ConfigError(f"invalid codec settings: {e}") from e
        return cls.from_options(options)

    def _configure(self, options: CodecOptions):
        alphabet = shuffle(options.alphabet)

        if len(alphabet) < MIN_ALPHABET_LENGTH:
            raise ConfigError(f"alphabet length must be at least {MIN_ALPHABET_LENGTH}")

        if not has_unique_chars(alphabet):
            raise ConfigError("alphabet must contain unique characters")

        if not MIN_VALUE <= options.min_length <= len(alphabet):
            raise ConfigError(f"minimum length has to be between {MIN_VALUE} and {len(alphabet)}")

        raw_blocklist = DEFAULT_BLOCKLIST if options.blocklist is None else options.blocklist
        alphabet_chars = set(alphabet)
        # Words holding characters outside the alphabet can never be produced.
        filtered = tuple(
            word.lower()
            for word in raw_blocklist
            if len(word) >= MIN_BLOCKLIST_WORD_LENGTH and set(word) <= alphabet_chars
        )

        self._alphabet = alphabet
        self._alphabet_chars = frozenset(alphabet_chars)
        self._min_length = options.min_length
        self._blocklist = filtered

        logger.info(
            "%s: codec ready, alphabet of %d chars, min_length=%d, %d blocklist words (%d supplied)",
            settings.PROJECT_NAME, len(alphabet), self._min_length, len(filtered), len(raw_blocklist)
        )

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def blocklist(self) -> Tuple[str, ...]:
        return self._blocklist

    def encode(self, numbers: Sequence[int]) -> str:
        """Encode numbers into an ID. An empty sequence gives an empty string."""
        numbers = tuple(numbers)
        if not numbers:
            return ""

        for n in numbers:
            if isinstance(n, bool) or not isinstance(n, int) or not MIN_VALUE <= n <= MAX_VALUE:
                raise RangeError(f"encoding supports numbers between {MIN_VALUE} and {MAX_VALUE}")

        return self._encode_numbers(numbers)

    def encode_single(self, number: int) -> str:
        return self.encode([number])

    def _encode_numbers(self, numbers: Tuple[int, ...], partitioned: bool = False) -> str:
        while True:
            id_, alphabet = self._assemble(numbers, partitioned)

            if len(id_) < self._min_length:
                if not partitioned:
                    logger.debug("ID '%s' shorter than %d, re-encoding with a partition", id_, self._min_length)
                    numbers = (0,) + numbers
                    id_ = self._encode_numbers(numbers, partitioned=True)

                if len(id_) < self._min_length:
                    id_ = id_[:1] + alphabet[:self._min_length - len(id_)] + id_[1:]

            if not self.is_blocked_id(id_):
                return id_

            logger.debug("ID '%s' matches the blocklist, re-encoding", id_)
            if partitioned:
                if numbers[0] + 1 > MAX_VALUE:
                    raise RangeError("ran out of range checking against the blocklist")
                numbers = (numbers[0] + 1,) + numbers[1:]
            else:
                numbers = (0,) + numbers
            partitioned = True

    def _assemble(self, numbers: Tuple[int, ...], partitioned: bool) -> Tuple[str, str]:
        """Build the unpadded ID and return it with the last sub-alphabet used."""
        size = len(self._alphabet)
        offset = len(numbers)
        for i, n in enumerate(numbers):
            offset += ord(self._alphabet[n % size]) + i
        offset %= size

        alphabet = rotate(self._alphabet, offset)
        prefix, partition = alphabet[0], alphabet[1]
        alphabet = alphabet[2:]

        parts = [prefix]
        last = len(numbers) - 1
        for i, n in enumerate(numbers):
            parts.append(to_id(n, alphabet[:-1]))

            if i < last:
                parts.append(partition if partitioned and i == 0 else alphabet[-1])
                alphabet = shuffle(alphabet)

        return ''.join(parts), alphabet

    def decode(self, id_: str) -> List[int]:
        """Decode an ID back into numbers.

        Returns an empty list when the ID is empty, holds characters outside
        the alphabet, or does not describe numbers in the encodable range.
        """
        if not id_:
            return []

        if not set(id_) <= self._alphabet_chars:
            return []

        alphabet = rotate(self._alphabet, self._alphabet.index(id_[0]))
        partition = alphabet[1]
        alphabet = alphabet[2:]
        id_ = id_[1:]

        partition_index = id_.find(partition)
        if 0 < partition_index < len(id_) - 1:
            id_ = id_[partition_index + 1:]
            alphabet = shuffle(alphabet)

        result = []
        while id_:
            separator = alphabet[-1]
            chunks = id_.split(separator)

            digits = alphabet[:-1]
            if any(ch not in digits for ch in chunks[0]):
                return []
            number = to_number(chunks[0], digits)
            if number > MAX_VALUE:
                return []
            result.append(number)

            if len(chunks) > 1:
                alphabet = shuffle(alphabet)

            id_ = separator.join(chunks[1:])

        return result

    def decode_single(self, id_: str) -> int:
        numbers = self.decode(id_)

        if not numbers:
            raise DecodeError("can't decode the ID")

        if len(numbers) > 1:
            raise DecodeError("produced more than one number")

        return numbers[0]

    def is_blocked_id(self, id_: str) -> bool:
        id_ = id_.lower()

        for word in self._blocklist:
            if len(word) > len(id_):
                continue
            if len(id_) <= 3 or len(word) <= 3:
                if id_ == word:
                    return True
            elif _DIGIT_RE.search(word):
                if id_.startswith(word) or id_.endswith(word):
                    return True
            elif word in id_:
                return True

        return False


@lru_cache(maxsize=1)
def get_codec() -> SqidsCodec:
    """Process-wide codec built from the environment settings."""
    return SqidsCodec.from_settings(settings)
