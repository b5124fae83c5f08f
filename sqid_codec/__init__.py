from sqid_codec.core.errors import CodecError, ConfigError, DecodeError, RangeError
from sqid_codec.schemas.options import CodecOptions
from sqid_codec.services.codec import MAX_VALUE, MIN_VALUE, SqidsCodec, get_codec
from sqid_codec.utils.blocklist import DEFAULT_BLOCKLIST
from sqid_codec.utils.encoding import DEFAULT_ALPHABET

__all__ = [
    "CodecError",
    "CodecOptions",
    "ConfigError",
    "DEFAULT_ALPHABET",
    "DEFAULT_BLOCKLIST",
    "DecodeError",
    "MAX_VALUE",
    "MIN_VALUE",
    "RangeError",
    "SqidsCodec",
    "get_codec",
]
