#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Console helpers for the command-line tool
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['Colors', 'DummyColors', 'enable_colors', 'hd_span', 'print_hexdump']

#######################################################################################

from collections import namedtuple
from types import SimpleNamespace
from typing import List

import colorama
from colorama import Fore, Style


## COLOR HELPERS ##

# dummy color namespaces for disabled color
DummyFore = SimpleNamespace(**dict((k,'') for k in Fore.__dict__))
DummyStyle = SimpleNamespace(**dict((k,'') for k in Style.__dict__))

# dictionaries for easier **foreground** color formatting
# >>> '{DIM}{GREEN}{!s}{RESET_ALL}'.format('hello world', **Colors)
DummyColors = dict(**DummyFore.__dict__, **DummyStyle.__dict__)
Colors = dict(**Fore.__dict__, **Style.__dict__)

_COLORAMA_INIT:bool = False

def enable_colors(color:bool=True) -> dict:
    """Return the color dictionary to format with, initializing colorama on first use
    """
    global _COLORAMA_INIT
    if not color:
        return DummyColors
    if not _COLORAMA_INIT:
        colorama.init()
        _COLORAMA_INIT = True
    return Colors


## HEXDUMP HELPERS ##

class hd_span(namedtuple('_hd_span', ('start', 'stop', 'color'))):
    """hd_span(start:int, stop:int, color:str)

    highlighted byte range for print_hexdump(), `color` is a format string such as '{BRIGHT}{CYAN}'
    """
    __slots__ = ()

def print_hexdump(data:bytes, *highlights:List[hd_span], show_header:bool=True, colors:dict=DummyColors):
    """Print `data` as 16-byte rows of hex and ascii, with optional highlighted spans
    """
    # default to '.' for control chars, space, del, and non-ascii chars
    CHARMAP = tuple((chr(b) if (32<b<127) else '.') for b in range(256))

    def hexbyte(i:int) -> str:
        if i >= len(data):
            return '   '
        for h in highlights:
            if h.start <= i < h.stop:
                return (' ' + h.color + '{:02x}{RESET_ALL}').format(data[i], **colors)
        return ' {:02x}'.format(data[i])

    if show_header:
        print('{BRIGHT}{BLUE}  Offset: 00 01 02 03 04 05 06 07 08 09 0A 0B 0C 0D 0E 0F {RESET_ALL}'.format(**colors))

    for off in range(0, len(data), 16):
        rowbytes = ''.join(hexbyte(i) for i in range(off, off+16))
        rowchars = ''.join(CHARMAP[b] for b in data[off:off+16])
        print('{BRIGHT}{BLUE}{:08x}:{RESET_ALL}{}   {BRIGHT}{GREEN}{!s}{RESET_ALL}'.format(off, rowbytes, rowchars, **colors))


del SimpleNamespace, List  # cleanup declaration-only imports
