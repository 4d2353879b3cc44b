# SPDX-License-Identifier: LicenseRef-CubeAlarm-Custom-Attribution
# Copyright (c) 2025 Paul Shapiro
"""Errors raised while decoding cube data frames."""

from __future__ import annotations
from typing import Optional


class CubeDataError(ValueError):
    """Base class for cube data decoding errors."""

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class MalformedFrame(CubeDataError):
    """The 36-cell buffer has a wrong length, out-of-range cells or a broken permutation."""


class InvalidOrientation(CubeDataError):
    """A corner carries an orientation code that is not a corner orientation."""
