"""Codec — bidirectional transform between internal paths and public URLs.

The encoder only ever produces the hash-fragment form. The decoder reads
both the hash-fragment form and the legacy ``code`` form, in a fixed
precedence order defined by ``detect_scheme``.
"""

from opaque.codec.decoder import decode
from opaque.codec.encoder import encode, encode_link
from opaque.codec.paths import normalize_path
from opaque.codec.schemes import (
    EncodingScheme,
    HashFragment,
    LegacyCode,
    Unencoded,
    detect_scheme,
)

__all__ = [
    "EncodingScheme",
    "HashFragment",
    "LegacyCode",
    "Unencoded",
    "decode",
    "detect_scheme",
    "encode",
    "encode_link",
    "normalize_path",
]
