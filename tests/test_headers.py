import struct
import unittest

from bmpfile.headers import (FileHeader, DIBHeader, HeaderType, DIBHeaderType, Compression,
    dpi_to_ppm, ppm_to_dpi, PIXEL_DATA_OFFSET)
from bmpfile.pixel import BGR24, BGR32
from bmpfile.status import InvalidFileHeaderError, InvalidDIBHeaderError, UnsupportedFormatError


class TestFileHeader(unittest.TestCase):

    def test_pack_layout(self):
        header = FileHeader(size=0x11223344, reserved1=b'\x01\x02', reserved2=b'\x03\x04', offset=0x36)
        data = header.pack()
        self.assertEqual(14, len(data))
        self.assertEqual(b'BM' + b'\x44\x33\x22\x11' + b'\x01\x02\x03\x04' + b'\x36\x00\x00\x00', data)

    def test_unpack(self):
        header = FileHeader.unpack(b'BM' + struct.pack('<I', 70) + b'abcd' + struct.pack('<I', 54))
        self.assertEqual(b'BM', header.signature)
        self.assertIs(HeaderType.BM, header.header_type)
        self.assertEqual(70, header.size)
        self.assertEqual(b'abcd', header.reserved)
        self.assertEqual(54, header.offset)

    def test_unpack_bad_magic(self):
        for magic in (b'BA', b'CI', b'PT', b'MB', b'\x00\x00'):
            data = magic + bytes(12)
            with self.assertRaises(InvalidFileHeaderError):
                FileHeader.unpack(data)

    def test_unpack_short(self):
        with self.assertRaises(InvalidFileHeaderError):
            FileHeader.unpack(b'BM\x00\x00')

    def test_reserved_accessors(self):
        header = FileHeader()
        self.assertEqual(bytes(4), header.reserved)
        header.reserved = b'\xde\xad\xbe\xef'
        self.assertEqual(b'\xde\xad', header.reserved1)
        self.assertEqual(b'\xbe\xef', header.reserved2)
        self.assertEqual(b'\xde\xad\xbe\xef', header.pack()[6:10])
        with self.assertRaises(ValueError):
            header.reserved = b'\x01\x02\x03'

    def test_derive(self):
        header = FileHeader(size=1, reserved1=b'ab', reserved2=b'cd', offset=99)
        derived = header.derive(12)
        self.assertEqual(PIXEL_DATA_OFFSET, derived.offset)
        self.assertEqual(66, derived.size)
        self.assertEqual(b'abcd', derived.reserved)
        self.assertEqual(2, derived.padding)
        # original untouched
        self.assertEqual(1, header.size)
        self.assertEqual(99, header.offset)

    def test_padding(self):
        for size, padding in ((54, 2), (55, 1), (56, 0), (57, 3), (60, 0)):
            self.assertEqual(padding, FileHeader(size=size).padding)

    def test_header_type_signature(self):
        self.assertEqual(b'BM', HeaderType.BM.signature)
        self.assertIs(HeaderType.BA, HeaderType.from_signature(b'BA'))
        self.assertIsNone(HeaderType.from_signature(b'ZZ'))


class TestDIBHeader(unittest.TestCase):

    def valid(self, **kwargs) -> DIBHeader:
        fields = dict(width=4, height=3, bpp=24, raw_size=36, hres=2835, vres=2835)
        fields.update(kwargs)
        return DIBHeader(**fields)

    def test_pack_layout(self):
        data = self.valid(width=-2, n_colors=7, important_colors=5).pack()
        self.assertEqual(40, len(data))
        # offsets relative to the DIB header (file offset - 0x0E)
        self.assertEqual((40,), struct.unpack_from('<I', data, 0x00))
        self.assertEqual((-2,), struct.unpack_from('<i', data, 0x04))
        self.assertEqual((3,),  struct.unpack_from('<i', data, 0x08))
        self.assertEqual((1,),  struct.unpack_from('<H', data, 0x0C))
        self.assertEqual((24,), struct.unpack_from('<H', data, 0x0E))
        self.assertEqual((0,),  struct.unpack_from('<I', data, 0x10))
        self.assertEqual((36,), struct.unpack_from('<I', data, 0x14))
        self.assertEqual((2835, 2835), struct.unpack_from('<ii', data, 0x18))
        self.assertEqual((7, 5), struct.unpack_from('<II', data, 0x20))

    def test_unpack(self):
        header = DIBHeader.unpack(self.valid().pack())
        self.assertEqual(self.valid(), header)

    def test_unpack_short(self):
        with self.assertRaises(InvalidDIBHeaderError):
            DIBHeader.unpack(bytes(39))

    def test_validate_ok(self):
        self.valid().validate(BGR24)
        self.valid(bpp=32).validate(BGR32)

    def test_validate_unsupported(self):
        for header in (self.valid(size=DIBHeaderType.BITMAPV5HEADER),
                       self.valid(size=DIBHeaderType.BITMAPCOREHEADER),
                       self.valid(bpp=32),
                       self.valid(bpp=8),
                       self.valid(compression=Compression.BI_RLE8),
                       self.valid(compression=Compression.BI_BITFIELDS),
                       self.valid(height=-3)):
            with self.assertRaises(UnsupportedFormatError, msg=repr(header)):
                header.validate(BGR24)

    def test_validate_invalid(self):
        for header in (self.valid(planes=0), self.valid(planes=2), self.valid(width=-4)):
            with self.assertRaises(InvalidDIBHeaderError, msg=repr(header)):
                header.validate(BGR24)

    def test_validate_format_checked_before_planes(self):
        with self.assertRaises(UnsupportedFormatError):
            self.valid(size=108, planes=3).validate(BGR24)

    def test_derive(self):
        header = self.valid(raw_size=0, hres=1, vres=2)
        derived = header.derive(BGR32, 96)
        self.assertEqual(4 * 3 * 4, derived.raw_size)
        self.assertEqual(3780, derived.hres)
        self.assertEqual(3780, derived.vres)
        self.assertEqual(0, header.raw_size)

    def test_pack_out_of_range(self):
        with self.assertRaises(InvalidDIBHeaderError):
            self.valid(width=2**31).pack()


class TestResolution(unittest.TestCase):

    def test_dpi_to_ppm(self):
        self.assertEqual(2835, dpi_to_ppm(72))
        self.assertEqual(3780, dpi_to_ppm(96))
        self.assertEqual(11811, dpi_to_ppm(300))

    def test_ppm_to_dpi(self):
        self.assertEqual(72, ppm_to_dpi(2835))
        self.assertEqual(72, ppm_to_dpi(2834))
        self.assertEqual(96, ppm_to_dpi(3780))
        self.assertEqual(300, ppm_to_dpi(11811))


if __name__ == '__main__':
    unittest.main()
