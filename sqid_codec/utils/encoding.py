DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


def shuffle(alphabet: str) -> str:
    """Deterministically permute an alphabet.

    Walks two indices towards each other and swaps each front character with a
    position derived from both indices and their character codes, so the same
    input always gives the same output.
    """
    chars = list(alphabet)
    length = len(chars)

    i, j = 0, length - 1
    while j > 0:
        r = (i * j + ord(chars[i]) + ord(chars[j])) % length
        chars[i], chars[r] = chars[r], chars[i]
        i += 1
        j -= 1

    return ''.join(chars)


def rotate(alphabet: str, offset: int) -> str:
    """Cyclic left rotation, so the result starts at alphabet[offset]."""
    return alphabet[offset:] + alphabet[:offset]


def has_unique_chars(s: str) -> bool:
    return len(set(s)) == len(s)


def to_id(num: int, alphabet: str) -> str:
    """Encode a non-negative integer positionally, always emitting one digit."""
    base = len(alphabet)
    out = []
    while True:
        num, rem = divmod(num, base)
        out.append(alphabet[rem])
        if num == 0:
            break
    return ''.join(reversed(out))


def to_number(digits: str, alphabet: str) -> int:
    """Inverse of to_id. Raises ValueError for a digit missing from the alphabet."""
    base = len(alphabet)
    n = 0
    for ch in digits:
        n = n * base + alphabet.index(ch)
    return n
