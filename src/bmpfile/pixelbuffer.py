#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Owned flat pixel storage with coordinate addressing
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['PixelBuffer']

#######################################################################################

import io
from struct import error as StructError
from typing import Iterator

from .status import BadInputError, OutOfBoundsError


class PixelBuffer:
    """PixelBuffer(pixel_type:type, width:int, height:int)

    a single zero-filled bytearray of `width * height` pixels of `pixel_type`.

    coordinates map to the linear index `row + col * width`. note that this is
    NOT the usual row-major `row * width + col`: `row` walks along a scanline
    and `col` selects the scanline.
    """
    __slots__ = ('pixel_type', 'width', 'height', '_buffer')

    def __init__(self, pixel_type:type, width:int, height:int):
        self.pixel_type = pixel_type
        self.width = width
        self.height = height
        # MemoryError and OverflowError are left to the caller
        self._buffer = bytearray(width * height * pixel_type.calcsize())

    def __len__(self) -> int:
        return self.width * self.height

    def __iter__(self) -> Iterator[tuple]:
        return self.pixel_type.iter_unpack(self._buffer)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.pixel_type.__name__}, {self.width!r}, {self.height!r})'

    @property
    def nbytes(self) -> int:
        return len(self._buffer)

    def index(self, row:int, col:int) -> int:
        return row + col * self.width

    def _offset(self, row:int, col:int) -> int:
        for coord in (row, col):
            if not isinstance(coord, int) or isinstance(coord, bool):
                raise BadInputError(f'pixel coordinates must be int, not {coord!r}')
        index = self.index(row, col)
        if row < 0 or col < 0 or index >= len(self):
            raise OutOfBoundsError(f'pixel ({row!r}, {col!r}) out of bounds for {self.width!r}x{self.height!r} image')
        return index * self.pixel_type.calcsize()

    def get(self, row:int, col:int) -> tuple:
        return self.pixel_type.unpack_from(self._buffer, self._offset(row, col))

    def set(self, row:int, col:int, pixel:tuple):
        offset = self._offset(row, col)
        try:
            self.pixel_type._struct_.pack_into(self._buffer, offset, *pixel)
        except (StructError, TypeError) as ex:
            raise BadInputError(f'invalid {self.pixel_type.__name__} pixel {pixel!r}: {ex}') from ex

    def tobytes(self) -> bytes:
        return bytes(self._buffer)

    #region ## READ/WRITE FUNCTIONS ##

    def readinto(self, reader:io.BufferedReader) -> int:
        """Fill the buffer from `reader`, returns the number of bytes read (may be short at EOF)
        """
        total = 0
        with memoryview(self._buffer) as view:
            while total < len(view):
                count = reader.readinto(view[total:])
                if not count:
                    break
                total += count
        return total

    def write(self, writer:io.BufferedWriter) -> int:
        return writer.write(self._buffer)

    #endregion
