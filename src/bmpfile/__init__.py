#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Windows bitmap (.bmp) file reading and writing library package

supports 'BM' files with a 40-byte BITMAPINFOHEADER and uncompressed 24 or 32-bit pixels.

modules:
  bmpfile.bitmap      - the Bitmap container: load, create, write, and per-pixel get/set.
  bmpfile.headers     - file header and DIB header structures, format enums, DPI conversion.
  bmpfile.pixel       - fixed-size pixel value types (BGR24, BGR32).
  bmpfile.pixelbuffer - flat pixel storage with coordinate addressing.
  bmpfile.status      - BmpStatus result codes and codec exceptions.

command-line tool:
  python -m bmpfile --help

"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['Bitmap', 'BmpStatus', 'BitmapError', 'BGR24', 'BGR32', 'FileHeader', 'DIBHeader', 'PixelBuffer', 'DEFAULT_DPI']

#######################################################################################

from .bitmap import Bitmap
from .headers import FileHeader, DIBHeader, DEFAULT_DPI
from .pixel import BGR24, BGR32
from .pixelbuffer import PixelBuffer
from .status import BmpStatus, BitmapError

from . import headers
from . import pixel
from . import status
