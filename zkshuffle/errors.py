# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# errors.py
#
# 18.10.2026
#
# @desc: Exceptions raised by the shuffle argument and its sub-protocols.
# ===================================================================


class ShuffleError(Exception):
    """Base class for all errors raised by this package."""


class LengthMismatchError(ShuffleError, ValueError):
    """Two vectors that must have the same length do not."""


class DotProductLenError(LengthMismatchError):
    """Operands of a dot product differ in length."""


class VerificationError(ShuffleError):
    """A proof was rejected. Recoverable, the caller should reject the
    statement the proof was given for."""


class ConfigError(ShuffleError, ValueError):
    """Public parameters are inconsistent or out of range."""


class SerializationError(ShuffleError, ValueError):
    """A serialized proof object is malformed."""
