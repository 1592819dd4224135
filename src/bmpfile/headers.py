#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Bitmap file header and DIB (BITMAPINFOHEADER) header structures

both headers are plain mutable records with a little-endian `struct.Struct`
layout. `unpack()` only checks what is needed to decode the bytes;
`DIBHeader.validate()` enforces the supported format combination.

supported: 'BM' file header, 40-byte BITMAPINFOHEADER, BI_RGB, bpp matching the pixel type.
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['HeaderType', 'DIBHeaderType', 'BitsPerPixel', 'Compression', 'FileHeader', 'DIBHeader', 'FILE_HEADER_SIZE', 'DIB_HEADER_SIZE', 'PIXEL_DATA_OFFSET', 'DEFAULT_DPI', 'INCHES_PER_METRE', 'dpi_to_ppm', 'ppm_to_dpi']

#######################################################################################

import enum, io
from struct import Struct, error as StructError
from typing import Optional, Type

from .status import InvalidFileHeaderError, InvalidDIBHeaderError, UnsupportedFormatError


#######################################################################################

#region ## CONSTANTS ##

FILE_HEADER_SIZE:int  = 14
DIB_HEADER_SIZE:int   = 40
PIXEL_DATA_OFFSET:int = FILE_HEADER_SIZE + DIB_HEADER_SIZE  # 0x36

# default DPI used when writing bitmaps
DEFAULT_DPI:int = 72
INCHES_PER_METRE:float = 0.0254  # 1 inch in metres

def dpi_to_ppm(dpi:int) -> int:
    """dots per inch -> pixels per metre (rounded to nearest)
    """
    return int(round(dpi / INCHES_PER_METRE))

def ppm_to_dpi(ppm:int) -> int:
    """pixels per metre -> dots per inch (rounded to nearest)
    """
    return int(round(ppm * INCHES_PER_METRE))

#endregion

#region ## BITMAP ENUMS ##

class HeaderType(enum.IntEnum):
    """File header magic tag, read as a little-endian uint16
    """
    BM = 0x4D42  # Windows 3.1x, 95, NT, ...
    BA = 0x4142  # OS/2 struct bitmap array
    CI = 0x4943  # OS/2 struct color icon
    CP = 0x5043  # OS/2 const color pointer
    IC = 0x4349  # OS/2 struct icon
    PT = 0x5450  # OS/2 pointer
    #
    @property
    def signature(self) -> bytes: return self.value.to_bytes(2, 'little')
    @classmethod
    def from_signature(cls, signature:bytes) -> Optional['HeaderType']:
        try:
            return cls(int.from_bytes(signature, 'little'))
        except ValueError:
            return None

class DIBHeaderType(enum.IntEnum):
    """DIB header variants, identified by their size in bytes
    """
    BITMAPCOREHEADER    = 12   # Windows 2.0, OS/2 1.x
    OS22XBITMAPHEADER16 = 16   # OS/2 BITMAPCOREHEADER2, first 16 bytes only
    BITMAPINFOHEADER    = 40   # Windows NT, 3.1x or later
    BITMAPV2INFOHEADER  = 52   # undocumented, Adobe Photoshop
    BITMAPV3INFOHEADER  = 56   # undocumented, Adobe Photoshop
    OS22XBITMAPHEADER64 = 64   # OS/2 BITMAPCOREHEADER2
    BITMAPV4HEADER      = 108  # Windows NT 4.0, 95 or later
    BITMAPV5HEADER      = 124  # Windows NT 5.0, 98 or later

class BitsPerPixel(enum.IntEnum):
    MONOCHROME  = 1
    PALETTIZED4 = 4
    PALETTIZED8 = 8
    RGB16       = 16
    RGB24       = 24
    RGB32       = 32

class Compression(enum.IntEnum):
    """source: <https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-wmf/4e588f70-bd92-4a6f-b77f-35d0feaf7a57>
    """
    BI_RGB            = 0x0000
    BI_RLE8           = 0x0001
    BI_RLE4           = 0x0002
    BI_BITFIELDS      = 0x0003
    BI_JPEG           = 0x0004
    BI_PNG            = 0x0005
    BI_ALPHABITFIELDS = 0x0006
    BI_CMYK           = 0x000B
    BI_CMYKRLE8       = 0x000C
    BI_CMYKRLE4       = 0x000D

def _enum_name(enumtype:Type[enum.IntEnum], value:int) -> str:
    try:
        return enumtype(value).name
    except ValueError:
        return f'0x{value:x}'

#endregion

#######################################################################################

#region ## FILE HEADER ##

class FileHeader:
    """FileHeader(signature:bytes=b'BM', size:int=0, reserved1:bytes=b'\\0\\0', reserved2:bytes=b'\\0\\0', offset:int=0)

    14-byte BITMAPFILEHEADER. the reserved fields are kept as opaque 2-byte strings.
    """
    __slots__ = ('signature', 'size', 'reserved1', 'reserved2', 'offset')
    _struct_ = Struct('<2s I 2s 2s I')

    def __init__(self, signature:bytes=HeaderType.BM.signature, size:int=0, reserved1:bytes=b'\x00\x00', reserved2:bytes=b'\x00\x00', offset:int=0):
        for k,v in zip(self.__slots__, (signature, size, reserved1, reserved2, offset)):
            setattr(self, k, v)
    #
    def __iter__(self):
        return iter((getattr(self, s) for s in self.__slots__))
    def __eq__(self, other) -> bool:
        if not isinstance(other, FileHeader):
            return NotImplemented
        return tuple(self) == tuple(other)
    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.signature!r}, size={self.size!r}, reserved={self.reserved.hex()}, offset=0x{self.offset:x})'
    __str__ = __repr__

    @property
    def header_type(self) -> Optional[HeaderType]:
        return HeaderType.from_signature(self.signature)

    @property
    def reserved(self) -> bytes:
        """both reserved fields, in file order (4 bytes)
        """
        return self.reserved1 + self.reserved2
    @reserved.setter
    def reserved(self, data:bytes):
        data = bytes(data)
        if len(data) != 4:
            raise ValueError(f'reserved data must be 4 bytes, not {len(data)}')
        self.reserved1, self.reserved2 = data[0:2], data[2:4]

    def copy(self) -> 'FileHeader':
        return FileHeader(*self)

    def derive(self, raw_size:int) -> 'FileHeader':
        """Return a copy with the size and pixel offset recomputed for a payload of `raw_size` bytes
        that directly follows both headers.
        """
        header = self.copy()
        header.offset = PIXEL_DATA_OFFSET
        header.size = header.offset + raw_size
        return header

    @property
    def padding(self) -> int:
        """number of zero bytes needed to pad the declared file size to a multiple of 4
        """
        return (4 - (self.size % 4)) % 4

    #region ## READ/WRITE FUNCTIONS ##

    @classmethod
    def unpack(cls, buffer:bytes) -> 'FileHeader':
        if len(buffer) < cls._struct_.size:
            raise InvalidFileHeaderError(f'file header requires {cls._struct_.size} bytes, got {len(buffer)}')
        header = cls(*cls._struct_.unpack_from(buffer))
        if header.header_type is not HeaderType.BM:
            raise InvalidFileHeaderError(f'invalid bitmap signature: {header.signature!r}')
        return header
    @classmethod
    def read(cls, reader:io.BufferedReader) -> 'FileHeader':
        return cls.unpack(reader.read(cls._struct_.size))

    def pack(self) -> bytes:
        try:
            return self._struct_.pack(*self)
        except StructError as ex:
            raise InvalidFileHeaderError(f'file header field out of range: {ex}') from ex
    def write(self, writer:io.BufferedWriter) -> int:
        return writer.write(self.pack())

    @classmethod
    def calcsize(cls) -> int: return cls._struct_.size

    #endregion

#endregion

#region ## DIB HEADER ##

class DIBHeader:
    """DIBHeader(size:int=40, width:int=0, height:int=0, planes:int=1, bpp:int=0, compression:int=BI_RGB,
                 raw_size:int=0, hres:int=0, vres:int=0, n_colors:int=0, important_colors:int=0)

    40-byte BITMAPINFOHEADER. resolutions are in pixels per metre.
    """
    __slots__ = ('size', 'width', 'height', 'planes', 'bpp', 'compression', 'raw_size', 'hres', 'vres', 'n_colors', 'important_colors')
    _struct_ = Struct('<I ii HH I I ii II')

    def __init__(self, size:int=DIBHeaderType.BITMAPINFOHEADER, width:int=0, height:int=0, planes:int=1, bpp:int=0, compression:int=Compression.BI_RGB, raw_size:int=0, hres:int=0, vres:int=0, n_colors:int=0, important_colors:int=0):
        for k,v in zip(self.__slots__, (size, width, height, planes, bpp, compression, raw_size, hres, vres, n_colors, important_colors)):
            setattr(self, k, v)
    #
    def __iter__(self):
        return iter((getattr(self, s) for s in self.__slots__))
    def __eq__(self, other) -> bool:
        if not isinstance(other, DIBHeader):
            return NotImplemented
        return tuple(self) == tuple(other)
    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}({_enum_name(DIBHeaderType, self.size)}, {self.width!r}x{self.height!r}, '
                f'planes={self.planes!r}, bpp={self.bpp!r}, {_enum_name(Compression, self.compression)}, '
                f'raw_size={self.raw_size!r}, res={self.hres!r}x{self.vres!r})')
    __str__ = __repr__

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def copy(self) -> 'DIBHeader':
        return DIBHeader(*self)

    def validate(self, pixel_type:type):
        """Check the header describes a format readable with `pixel_type`.

        raises UnsupportedFormatError for other header variants, bit depths or compression methods.
        raises InvalidDIBHeaderError for a malformed header.
        """
        if self.size != DIBHeaderType.BITMAPINFOHEADER:
            raise UnsupportedFormatError(f'unsupported DIB header: {_enum_name(DIBHeaderType, self.size)}')
        if self.bpp != pixel_type.bpp():
            raise UnsupportedFormatError(f'unsupported bits per pixel {self.bpp!r} for {pixel_type.__name__}')
        if self.compression != Compression.BI_RGB:
            raise UnsupportedFormatError(f'unsupported compression: {_enum_name(Compression, self.compression)}')
        if self.planes != 1:
            raise InvalidDIBHeaderError(f'color planes must be 1, not {self.planes!r}')
        if self.width < 0:
            raise InvalidDIBHeaderError(f'negative width: {self.width!r}')
        if self.height < 0:
            raise UnsupportedFormatError(f'top-down bitmaps are not supported (height {self.height!r})')

    def derive(self, pixel_type:type, dpi:int) -> 'DIBHeader':
        """Return a copy with the raw pixel size recomputed for `pixel_type` and both resolutions set from `dpi`
        """
        header = self.copy()
        header.raw_size = self.pixel_count * pixel_type.calcsize()
        header.hres = header.vres = dpi_to_ppm(dpi)
        return header

    #region ## READ/WRITE FUNCTIONS ##

    @classmethod
    def unpack(cls, buffer:bytes) -> 'DIBHeader':
        if len(buffer) < cls._struct_.size:
            raise InvalidDIBHeaderError(f'DIB header requires {cls._struct_.size} bytes, got {len(buffer)}')
        return cls(*cls._struct_.unpack_from(buffer))
    @classmethod
    def read(cls, reader:io.BufferedReader) -> 'DIBHeader':
        return cls.unpack(reader.read(cls._struct_.size))

    def pack(self) -> bytes:
        try:
            return self._struct_.pack(*self)
        except StructError as ex:
            raise InvalidDIBHeaderError(f'DIB header field out of range: {ex}') from ex
    def write(self, writer:io.BufferedWriter) -> int:
        return writer.write(self.pack())

    @classmethod
    def calcsize(cls) -> int: return cls._struct_.size

    #endregion

#endregion

assert(FileHeader.calcsize() == FILE_HEADER_SIZE)
assert(DIBHeader.calcsize() == DIB_HEADER_SIZE)
