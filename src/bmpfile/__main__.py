#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Bitmap inspection and editing tool
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

#######################################################################################

import os
from typing import Optional

from ._util import enable_colors, hd_span, print_hexdump
from .bitmap import Bitmap
from .headers import DIBHeader, FILE_HEADER_SIZE, PIXEL_DATA_OFFSET, DEFAULT_DPI
from .pixel import PIXEL_TYPES, BGR24
from .status import BmpStatus, BitmapError


## HELPERS ##

def detect_pixel_type(filename:str, default:type=BGR24) -> type:
    """Return the pixel type matching the bit depth declared in a bitmap file, or `default`
    """
    try:
        with open(filename, 'rb') as f:
            f.seek(FILE_HEADER_SIZE)
            dib = DIBHeader.read(f)
    except (OSError, BitmapError):
        return default
    return PIXEL_TYPES.get(dib.bpp, default)

def print_status(action:str, filename:str, status:BmpStatus, colors:dict) -> bool:
    """Print the result of an operation, returns True on success
    """
    if status:
        print('{BRIGHT}{RED}{}:{RESET_ALL}'.format(action, **colors), filename,
              '{DIM}{RED}({!s} 0x{:04X}){RESET_ALL}'.format(status.description, status.value, **colors))
        return False
    print('{BRIGHT}{GREEN}{}:{RESET_ALL}'.format(action, **colors), filename)
    return True


## INFO ##

def print_info(filename:str, *, hexdump:bool=False, colors:dict) -> bool:
    """Print the header fields of a bitmap file
    """
    bmp = Bitmap(detect_pixel_type(filename))
    if not print_status('Info', filename, bmp.load(filename), colors):
        return False

    fh, dib = bmp.file_header, bmp.dib_header
    fields = (
        ('signature',   fh.signature.decode('latin-1')),
        ('file size',   fh.size),
        ('reserved',    fh.reserved.hex()),
        ('offset',      f'0x{fh.offset:x}'),
        ('dimensions',  f'{dib.width}x{dib.height}'),
        ('bpp',         dib.bpp),
        ('raw size',    dib.raw_size),
        ('resolution',  f'{dib.hres}x{dib.vres} ppm ({bmp.dpi} dpi)'),
        ('colors',      f'{dib.n_colors} ({dib.important_colors} important)'),
    )
    for name, value in fields:
        print('  {DIM}{CYAN}{}{RESET_ALL}'.format(name.ljust(10), **colors), value)

    if hexdump:
        with open(filename, 'rb') as f:
            data = f.read(PIXEL_DATA_OFFSET)
        print_hexdump(data,
            hd_span(0, FILE_HEADER_SIZE, '{BRIGHT}{YELLOW}'),
            hd_span(FILE_HEADER_SIZE, PIXEL_DATA_OFFSET, '{BRIGHT}{CYAN}'),
            colors=colors)
    return True


## EDIT ##

CHANNELS:dict = {'b': 'b', 'g': 'g', 'r': 'r', 'a': 'alpha'}

def strip_channel(infile:str, outfile:str, channel:str, *, reserved:Optional[bytes]=None, colors:dict) -> bool:
    """Zero one color channel of every pixel, then write the result
    """
    bmp = Bitmap(detect_pixel_type(infile))
    if not print_status('Loading', infile, bmp.load(infile), colors):
        return False
    field = CHANNELS[channel]
    if field not in bmp.pixel_type._fields:
        raise ValueError(f'{bmp.pixel_type.__name__} has no {field!r} channel')

    width, height = bmp.width(), bmp.height()
    for i in range(width):
        for j in range(height):
            status, pixel = bmp.get(i, j)
            if not status:
                status = bmp.set(i, j, pixel._replace(**{field: 0}))
            if status:
                print_status(f'Pixel ({i}, {j})', infile, status, colors)
                return False

    if reserved is not None:
        if not print_status('Reserved', bytes(reserved).hex(), bmp.write_header_rsvd(reserved), colors):
            return False
    return print_status('Writing', outfile, bmp.write(outfile), colors)

def create_blank(width:int, height:int, outfile:str, pixel_type:type, dpi:int, *, colors:dict) -> bool:
    bmp = Bitmap(pixel_type, dpi)
    if not print_status('Creating', f'{width}x{height}', bmp.create(width, height), colors):
        return False
    return print_status('Writing', outfile, bmp.write(outfile), colors)


## MAIN FUNCTION ##

def main(argv:list=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog='python -m bmpfile',
        description='Bitmap (.bmp) inspection and editing tool',
        add_help=True)
    parser.add_argument('-i','--info', metavar='BMP', action='append',
        help='print header fields of a bitmap file')
    parser.add_argument('-x','--hexdump', action='store_true', default=False,
        help='with --info, also dump the header bytes')
    parser.add_argument('-c','--create', metavar=('WIDTH','HEIGHT','BMP'), action='append', nargs=3,
        help='write a blank bitmap file')
    parser.add_argument('-s','--strip', metavar=('CHANNEL','INBMP','OUTBMP'), action='append', nargs=3,
        help='zero one channel (r, g, b, a) of every pixel and write to output file')
    parser.add_argument('-r','--reserved', metavar='HEX', dest='reserved', action='store', default=None,
        help='with --strip, 4 reserved header bytes to write (8 hex digits)')
    parser.add_argument('--bpp', dest='bpp', type=int, choices=sorted(PIXEL_TYPES), default=24,
        help='pixel bit depth for --create (default: 24)')
    parser.add_argument('--dpi', dest='dpi', type=int, default=DEFAULT_DPI,
        help=f'resolution for --create (default: {DEFAULT_DPI})')
    parser.add_argument('-C', '--no-color', dest='color', action='store_false', default=True,
        help='disable color printing')

    args = parser.parse_args(argv)
    colors = enable_colors(args.color)

    reserved = None
    if args.reserved is not None:
        try:
            reserved = bytes.fromhex(args.reserved)
        except ValueError:
            parser.error(f'--reserved must be hex digits: {args.reserved!r}')
        if len(reserved) != 4:
            parser.error(f'--reserved must be 4 bytes, not {len(reserved)}')
    if args.dpi <= 0:
        parser.error(f'--dpi must be positive: {args.dpi!r}')

    ok = True

    # [--info]
    for infile in (args.info or []):
        ok &= print_info(infile, hexdump=args.hexdump, colors=colors)

    # [--create]
    for width,height,outfile in (args.create or []):
        try:
            width, height = int(width), int(height)
        except ValueError:
            parser.error(f'--create dimensions must be integers: {width!r} {height!r}')
        ok &= create_blank(width, height, outfile, PIXEL_TYPES[args.bpp], args.dpi, colors=colors)

    # [--strip]
    for channel,infile,outfile in (args.strip or []):
        channel = channel.lower()
        if channel not in CHANNELS:
            parser.error(f'--strip channel must be one of {", ".join(CHANNELS)}: {channel!r}')
        if os.path.isdir(outfile):  # write to outfile/infilename
            outfile = os.path.join(outfile, os.path.basename(infile))
        try:
            ok &= strip_channel(infile, outfile, channel, reserved=reserved, colors=colors)
        except ValueError as ex:
            print('{BRIGHT}{RED}Error:{RESET_ALL}'.format(**colors), ex)
            ok = False

    return 0 if ok else 1


## MAIN CONDITION ##

if __name__ == '__main__':
    exit(main())
