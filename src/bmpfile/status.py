#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Bitmap operation status codes and the exceptions raised inside the codecs

public `Bitmap` operations never raise these, they return the `status` instead.
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['BmpStatus', 'BitmapError', 'InvalidFileHeaderError', 'InvalidDIBHeaderError', 'UnsupportedFormatError', 'OutOfBoundsError', 'TruncatedDataError', 'BadInputError']

#######################################################################################

import enum


#region ## STATUS CODES ##

class BmpStatus(enum.IntEnum):
    """Result of a Bitmap operation. SUCCESS is the only falsy member.

    >>> if bmp.load('in.bmp'): ...  # error branch
    """
    SUCCESS         = 0x0000
    #
    OOM             = 0xE001  # pixel buffer allocation failed
    FILE_ERROR      = 0xE002  # file could not be opened, read, or written
    OOB             = 0xE003  # pixel coordinates outside the buffer
    NOT_INIT        = 0xE004  # no image loaded or created yet
    INVALID_HDR     = 0xE005  # bad file header (magic tag)
    INVALID_DIB     = 0xE006  # bad DIB header (planes, dimensions)
    UNSUPPORTED_FMT = 0xE007  # valid bitmap, but not a variant this library handles
    ALREADY_INIT    = 0xE008  # image already loaded or created
    BAD_INPUT       = 0xE009  # caller argument rejected
    TRUNCATED       = 0xE00A  # file ends before the pixel data does
    #
    def __bool__(self) -> bool: return self is not BmpStatus.SUCCESS

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

_DESCRIPTIONS:dict = {
    BmpStatus.SUCCESS:         'success',
    BmpStatus.OOM:             'out of memory',
    BmpStatus.FILE_ERROR:      'file access error',
    BmpStatus.OOB:             'pixel out of bounds',
    BmpStatus.NOT_INIT:        'bitmap not initialized',
    BmpStatus.INVALID_HDR:     'invalid file header',
    BmpStatus.INVALID_DIB:     'invalid DIB header',
    BmpStatus.UNSUPPORTED_FMT: 'unsupported bitmap format',
    BmpStatus.ALREADY_INIT:    'bitmap already initialized',
    BmpStatus.BAD_INPUT:       'bad input',
    BmpStatus.TRUNCATED:       'truncated pixel data',
}

#endregion

#region ## EXCEPTIONS ##

class BitmapError(Exception):
    """Base class for codec and pixel buffer errors, maps onto a BmpStatus
    """
    status:BmpStatus = BmpStatus.BAD_INPUT

    def __init__(self, message:str=None):
        super().__init__(message or self.status.description)

class InvalidFileHeaderError(BitmapError):
    status = BmpStatus.INVALID_HDR

class InvalidDIBHeaderError(BitmapError):
    status = BmpStatus.INVALID_DIB

class UnsupportedFormatError(BitmapError):
    status = BmpStatus.UNSUPPORTED_FMT

class OutOfBoundsError(BitmapError, IndexError):
    status = BmpStatus.OOB

class TruncatedDataError(BitmapError):
    status = BmpStatus.TRUNCATED

class BadInputError(BitmapError, ValueError):
    status = BmpStatus.BAD_INPUT

#endregion
