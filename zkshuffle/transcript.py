# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# transcript.py
#
# 18.10.2026
#
# @desc: Fiat-Shamir transcript. Prover and verifier append the same
#        labelled values in the same order and derive identical
#        challenges from the running SHA3-256 state.
# ===================================================================
import hashlib

from zkshuffle.eccwrapper import ShortPoint
from zkshuffle.pedersen import CommitKey


class Transcript:
    """Append-only log of labelled byte strings with challenge derivation.

    Attributes:
        log (Tuple[(bytes, bytes)]): everything appended so far
    """
    def __init__(self, label=b'zkshuffle'):
        """
        Args:
            label (bytes): protocol domain separator
        """
        self._hasher = hashlib.sha3_256()
        self._log = []
        self.append_message(b'dom-sep', label)

    @property
    def log(self):
        return tuple(self._log)

    def append_message(self, label, data):
        """Absorb raw bytes under a label

        Args:
            label (bytes): label
            data (bytes): message
        """
        self._hasher.update(len(label).to_bytes(4, 'big'))
        self._hasher.update(label)
        self._hasher.update(len(data).to_bytes(8, 'big'))
        self._hasher.update(data)
        self._log.append((label, data))

    def append(self, label, value):
        """Absorb an integer, point, cipher, commit key or a (nested) list
        of them under a label

        Args:
            label (bytes): label
            value: value to absorb
        """
        self.append_message(label, encode(value))

    def challenge_scalar(self, label, order):
        """Derive a challenge in [0, order) from everything appended so far.
        The label is absorbed as well, so the next challenge differs.

        Args:
            label (bytes): challenge label
            order (int): order of the scalar field

        Returns:
            int: challenge
        """
        self.append_message(label, b'challenge')
        seed = self._hasher.copy().digest()
        wide = hashlib.sha3_512(seed).digest()
        return int.from_bytes(wide, 'big') % order

    def fork(self):
        """Copy of the transcript with its own state and log. Appends to
        the copy do not reach this transcript.

        Returns:
            Transcript
        """
        var0 = Transcript.__new__(Transcript)
        var0._hasher = self._hasher.copy()
        var0._log = list(self._log)
        return var0


def encode(value):
    """Type tagged, length prefixed encoding of a transcript value

    Args:
        value: int, bytes, ShortPoint, CommitKey or list/tuple of those

    Returns:
        bytes
    """
    if isinstance(value, bool):
        raise TypeError('cannot append bool to transcript')
    if isinstance(value, int):
        var0 = value.to_bytes((value.bit_length() + 8) // 8, 'big',
                              signed=True)
        return b'I' + len(var0).to_bytes(4, 'big') + var0
    if isinstance(value, (bytes, bytearray)):
        return b'B' + len(value).to_bytes(4, 'big') + bytes(value)
    if isinstance(value, ShortPoint):
        return b'P' + encode(value.x) + encode(value.y)
    if isinstance(value, CommitKey):
        return b'K' + encode(value.to_list())
    if isinstance(value, (list, tuple)):
        var0 = b'L' + len(value).to_bytes(4, 'big')
        for item in value:
            var0 += encode(item)
        return var0
    raise TypeError('cannot append %s to transcript' % type(value).__name__)
