class CodecError(ValueError):
    """Base class for every error raised by the codec."""


class ConfigError(CodecError):
    """Raised when a codec cannot be built from the given options."""


class RangeError(CodecError):
    """Raised when a number falls outside the encodable range."""


class DecodeError(CodecError):
    """Raised when an ID does not decode to exactly one number."""
