#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Plain fixed-size pixel value types

pixels are immutable namedtuples of byte channels, stored in bitmap (BGR) order.
calling a pixel type with no arguments returns the zero pixel:
>>> BGR24()
BGR24(b=0, g=0, r=0)
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['BGR24', 'BGR32', 'PIXEL_TYPES']

#######################################################################################

from collections import namedtuple
from struct import Struct
from typing import Dict, Iterator, Type


#region ## PIXEL TYPES ##

class BGR24(namedtuple('_BGR24', ('b', 'g', 'r'))):
    """BGR24(b:int=..., g:int=..., r:int=...)

    24-bit pixel: blue, green, red.
    """
    __slots__ = ()
    _struct_ = Struct('<BBB')
    def __new__(cls, b:int=..., g:int=..., r:int=...):
        num_args = sum(a is not Ellipsis for a in (b,g,r))
        if num_args == 0:
            b = g = r = 0
        elif num_args != len(cls._fields):
            raise TypeError(f'__new__() requires 0 or 3 arguments, not {num_args}')
        return super().__new__(cls, b, g, r)
    @classmethod
    def unpack(cls, buffer:bytes) -> 'BGR24': return cls(*cls._struct_.unpack(buffer))
    @classmethod
    def unpack_from(cls, buffer:bytes, offset:int=0) -> 'BGR24': return cls(*cls._struct_.unpack_from(buffer, offset))
    @classmethod
    def iter_unpack(cls, buffer:bytes) -> Iterator['BGR24']: return iter((cls(*v) for v in cls._struct_.iter_unpack(buffer)))
    def pack(self) -> bytes: return self._struct_.pack(*self)
    def pack_into(self, buffer:bytearray, offset:int): self._struct_.pack_into(buffer, offset, *self)
    @classmethod
    def calcsize(cls) -> int: return cls._struct_.size
    @classmethod
    def bpp(cls) -> int: return cls._struct_.size * 8

class BGR32(namedtuple('_BGR32', ('b', 'g', 'r', 'alpha'))):
    """BGR32(b:int=..., g:int=..., r:int=..., alpha:int=0)

    32-bit pixel: blue, green, red, alpha. alpha is optional when the color channels are given.
    """
    __slots__ = ()
    _struct_ = Struct('<BBBB')
    def __new__(cls, b:int=..., g:int=..., r:int=..., alpha:int=0):
        num_args = sum(a is not Ellipsis for a in (b,g,r))
        if num_args == 0:
            b = g = r = 0
        elif num_args != 3:
            raise TypeError(f'__new__() requires 0, 3 or 4 arguments, not {num_args}')
        return super().__new__(cls, b, g, r, alpha)
    @classmethod
    def unpack(cls, buffer:bytes) -> 'BGR32': return cls(*cls._struct_.unpack(buffer))
    @classmethod
    def unpack_from(cls, buffer:bytes, offset:int=0) -> 'BGR32': return cls(*cls._struct_.unpack_from(buffer, offset))
    @classmethod
    def iter_unpack(cls, buffer:bytes) -> Iterator['BGR32']: return iter((cls(*v) for v in cls._struct_.iter_unpack(buffer)))
    def pack(self) -> bytes: return self._struct_.pack(*self)
    def pack_into(self, buffer:bytearray, offset:int): self._struct_.pack_into(buffer, offset, *self)
    @classmethod
    def calcsize(cls) -> int: return cls._struct_.size
    @classmethod
    def bpp(cls) -> int: return cls._struct_.size * 8

#endregion

# bits per pixel -> pixel type
PIXEL_TYPES:Dict[int, Type[tuple]] = {
    BGR24.bpp(): BGR24,
    BGR32.bpp(): BGR32,
}


del Iterator  # cleanup declaration-only imports
