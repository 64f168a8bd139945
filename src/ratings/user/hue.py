"""Avatar hue derived from a username.

The hue is a cosmetic colour-wheel position, not an identifier: different
names may land on the same hue. It is recomputed from the name wherever it
is needed instead of being stored next to it.
"""

import hashlib

HUE_RANGE = 360


def hue(name: str) -> int:
    """Map a name to a hue in ``[0, 360)``.

    MD5 of the UTF-8 bytes, first two digest bytes read as a big-endian
    unsigned 16-bit integer, reduced modulo 360. No normalization is applied,
    so names that differ only in Unicode form hash differently.
    """
    digest = hashlib.md5(name.encode("utf-8")).digest()
    return int.from_bytes(digest[:2], "big") % HUE_RANGE
