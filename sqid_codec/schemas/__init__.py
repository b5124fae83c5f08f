# re-export common schemas for simpler imports
from .options import CodecOptions

__all__ = [
    "CodecOptions",
]
