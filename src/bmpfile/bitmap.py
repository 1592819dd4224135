#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Bitmap image container: load, create, edit and write `.bmp` files

>>> from bmpfile import Bitmap, BGR24
>>> bmp = Bitmap(BGR24)
>>> bmp.create(2, 2)
<BmpStatus.SUCCESS: 0>
>>> bmp.set(1, 0, BGR24(255, 0, 0))
<BmpStatus.SUCCESS: 0>
>>> bmp.write('blue.bmp')
<BmpStatus.SUCCESS: 0>

every public operation returns a BmpStatus (or a `(status, value)` pair) instead of raising.
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['Bitmap']

#######################################################################################

import io, os
from typing import Optional, Sequence, Tuple, Union

from .headers import FileHeader, DIBHeader, DEFAULT_DPI, PIXEL_DATA_OFFSET, ppm_to_dpi
from .pixel import BGR24
from .pixelbuffer import PixelBuffer
from .status import BmpStatus, BitmapError, TruncatedDataError

PathLike = Union[str, bytes, os.PathLike]

INT32_MAX:int  = 0x7fffffff
UINT32_MAX:int = 0xffffffff


def _check_filename(filename:PathLike) -> BmpStatus:
    """Return BAD_INPUT for a filename open() can never accept, otherwise SUCCESS
    """
    if not isinstance(filename, (str, bytes, os.PathLike)):
        return BmpStatus.BAD_INPUT
    try:
        path = os.fspath(filename)
    except TypeError:
        # __fspath__ returned neither str nor bytes
        return BmpStatus.BAD_INPUT
    if ('\0' if isinstance(path, str) else b'\0') in path:
        return BmpStatus.BAD_INPUT
    return BmpStatus.SUCCESS

def _remaining(reader:io.BufferedReader) -> int:
    """Return the number of bytes left between the current position and the end of `reader`
    """
    position = reader.tell()
    reader.seek(0, 2)
    length = reader.tell()
    reader.seek(position, 0)
    return length - position


class Bitmap:
    """Bitmap(pixel_type:type=BGR24, dpi:int=DEFAULT_DPI)

    starts empty, becomes ready after a successful `load()` or `create()`.
    only one image can be held at a time: `release()` returns the container to empty.
    """

    def __init__(self, pixel_type:type=BGR24, dpi:int=DEFAULT_DPI):
        if not (isinstance(pixel_type, type) and hasattr(pixel_type, '_struct_')):
            raise TypeError(f'pixel_type must be a pixel type such as BGR24, not {pixel_type!r}')
        if not isinstance(dpi, int) or not (0 < dpi <= INT32_MAX):
            raise ValueError(f'dpi must be a positive int32, not {dpi!r}')
        self._pixel_type:type = pixel_type
        self._dpi:int = dpi
        self._file_header:Optional[FileHeader] = None
        self._dib:Optional[DIBHeader] = None
        self._pixels:Optional[PixelBuffer] = None
        self._loaded:bool = False

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.release()

    def __repr__(self) -> str:
        if not self._loaded:
            return f'<{self.__class__.__name__} {self._pixel_type.__name__} empty>'
        return f'<{self.__class__.__name__} {self._pixel_type.__name__} {self._dib.width}x{self._dib.height} dpi={self._dpi}>'

    #region ## PROPERTIES ##

    @property
    def loaded(self) -> bool: return self._loaded
    @property
    def pixel_type(self) -> type: return self._pixel_type
    @property
    def dpi(self) -> int: return self._dpi

    @property
    def file_header(self) -> Optional[FileHeader]:
        """copy of the file header as loaded or created (None when empty)
        """
        return self._file_header.copy() if self._loaded else None
    @property
    def dib_header(self) -> Optional[DIBHeader]:
        """copy of the DIB header as loaded or created (None when empty)
        """
        return self._dib.copy() if self._loaded else None

    def width(self) -> int:
        """Return the image width, or BmpStatus.NOT_INIT when empty
        """
        if self._loaded:
            return self._dib.width
        return int(BmpStatus.NOT_INIT)

    def height(self) -> int:
        """Return the image height, or BmpStatus.NOT_INIT when empty
        """
        if self._loaded:
            return self._dib.height
        return int(BmpStatus.NOT_INIT)

    #endregion

    #region ## LIFECYCLE ##

    def load(self, filename:PathLike) -> BmpStatus:
        """Load a bitmap file. The container must be empty.
        """
        if self._loaded:
            return BmpStatus.ALREADY_INIT
        status = _check_filename(filename)
        if status:
            return status
        try:
            with open(filename, 'rb') as reader:
                file_header, dib, pixels = self._read(reader)
        except BitmapError as ex:
            return ex.status
        except (MemoryError, OverflowError):
            return BmpStatus.OOM
        except OSError:
            return BmpStatus.FILE_ERROR

        self._file_header = file_header
        self._dib = dib
        self._pixels = pixels
        # horizontal resolution only, vertical is assumed equal.
        # a missing resolution (0 or negative) keeps the configured DPI
        dpi = ppm_to_dpi(dib.hres)
        if dpi > 0:
            self._dpi = dpi
        self._loaded = True
        return BmpStatus.SUCCESS

    def _read(self, reader:io.BufferedReader) -> Tuple[FileHeader, DIBHeader, PixelBuffer]:
        file_header = FileHeader.read(reader)
        dib = DIBHeader.read(reader)
        dib.validate(self._pixel_type)

        # check the payload is present before allocating for it
        raw_size = dib.pixel_count * self._pixel_type.calcsize()
        remaining = _remaining(reader)
        if remaining < raw_size:
            raise TruncatedDataError(f'expected {raw_size} bytes of pixel data, got {remaining}')

        pixels = PixelBuffer(self._pixel_type, dib.width, dib.height)
        count = pixels.readinto(reader)
        if count != pixels.nbytes:
            raise TruncatedDataError(f'expected {pixels.nbytes} bytes of pixel data, got {count}')
        return file_header, dib, pixels

    def create(self, width:int, height:int) -> BmpStatus:
        """Create a blank (zeroed) image. The container must be empty.
        """
        if self._loaded:
            return BmpStatus.ALREADY_INIT
        for dim in (width, height):
            if not isinstance(dim, int) or isinstance(dim, bool) or not (0 <= dim <= INT32_MAX):
                return BmpStatus.BAD_INPUT
        raw_size = width * height * self._pixel_type.calcsize()
        if PIXEL_DATA_OFFSET + raw_size > UINT32_MAX:
            return BmpStatus.BAD_INPUT

        try:
            pixels = PixelBuffer(self._pixel_type, width, height)
        except (MemoryError, OverflowError):
            return BmpStatus.OOM

        dib = DIBHeader(width=width, height=height, bpp=self._pixel_type.bpp())
        self._file_header = FileHeader().derive(raw_size)
        self._dib = dib.derive(self._pixel_type, self._dpi)
        self._pixels = pixels
        self._loaded = True
        return BmpStatus.SUCCESS

    def write(self, filename:PathLike) -> BmpStatus:
        """Write the image to a file, overwriting it.

        size, offset, raw size and resolution fields are recomputed, the file is then
        zero-padded to a multiple of 4 bytes. the write is not atomic.
        """
        if not self._loaded:
            return BmpStatus.NOT_INIT
        status = _check_filename(filename)
        if status:
            return status
        try:
            dib = self._dib.derive(self._pixel_type, self._dpi)
            file_header = self._file_header.derive(dib.raw_size)
            header_bytes = file_header.pack() + dib.pack()
        except BitmapError as ex:
            return ex.status

        try:
            with open(filename, 'wb') as writer:
                writer.write(header_bytes)
                self._pixels.write(writer)
                writer.write(bytes(file_header.padding))
        except OSError:
            return BmpStatus.FILE_ERROR
        return BmpStatus.SUCCESS

    def release(self):
        """Drop the image and return to the empty state (the DPI setting is kept)
        """
        self._file_header = None
        self._dib = None
        self._pixels = None
        self._loaded = False

    #endregion

    #region ## PIXEL ACCESS ##

    def get(self, row:int, col:int) -> Tuple[BmpStatus, Optional[tuple]]:
        """Return `(status, pixel)`, pixel is None unless status is SUCCESS.

        the pixel index is `row + col * width`.
        """
        if not self._loaded:
            return BmpStatus.NOT_INIT, None
        try:
            return BmpStatus.SUCCESS, self._pixels.get(row, col)
        except BitmapError as ex:
            return ex.status, None

    def set(self, row:int, col:int, pixel:Sequence[int]) -> BmpStatus:
        """Copy `pixel` into the image, the pixel index is `row + col * width`.
        """
        if not self._loaded:
            return BmpStatus.NOT_INIT
        try:
            self._pixels.set(row, col, pixel)
        except BitmapError as ex:
            return ex.status
        return BmpStatus.SUCCESS

    #endregion

    #region ## RESERVED HEADER BYTES ##

    def read_header_rsvd(self) -> Tuple[BmpStatus, Optional[bytes]]:
        """Return `(status, data)`, data is the 4 reserved file header bytes
        """
        if not self._loaded:
            return BmpStatus.NOT_INIT, None
        return BmpStatus.SUCCESS, self._file_header.reserved

    def write_header_rsvd(self, data:Union[bytes, Sequence[int]]) -> BmpStatus:
        """Overwrite the 4 reserved file header bytes
        """
        if not self._loaded:
            return BmpStatus.NOT_INIT
        if data is None or isinstance(data, (int, str)):
            return BmpStatus.BAD_INPUT
        try:
            data = bytes(data)
        except (TypeError, ValueError):
            return BmpStatus.BAD_INPUT
        if len(data) != 4:
            return BmpStatus.BAD_INPUT
        self._file_header.reserved = data
        return BmpStatus.SUCCESS

    #endregion
