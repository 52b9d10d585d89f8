import struct
from typing import BinaryIO, List, Union

from glbridge.errors import SnapshotDecodeError


def read_exact(f: BinaryIO, size: int) -> bytes:
    """ Reads exactly `size` bytes, failing on a truncated stream """
    data = f.read(size)
    if len(data) != size:
        raise SnapshotDecodeError(
            f"Unexpected end of stream, wanted {size} bytes but got {len(data)}")
    return data


def _pack(fmt: str, val: Union[int, float, List[int], List[float]]) -> bytes:
    if isinstance(val, list):
        return struct.pack(">" + (fmt*len(val)), *val)
    return struct.pack(">" + fmt, val)


def read_sint32(f: BinaryIO) -> int:
    return struct.unpack(">i", read_exact(f, 4))[0]


def write_sint32(f: BinaryIO, val: Union[int, List[int]]):
    f.write(_pack("i", val))


def read_uint32(f: BinaryIO) -> int:
    return struct.unpack(">I", read_exact(f, 4))[0]


def write_uint32(f: BinaryIO, val: Union[int, List[int]]):
    f.write(_pack("I", val))


def read_double(f: BinaryIO) -> float:
    return struct.unpack(">d", read_exact(f, 8))[0]


def write_double(f: BinaryIO, val: Union[float, List[float]]):
    f.write(_pack("d", val))


def read_bool(f: BinaryIO) -> bool:
    return any(read_exact(f, 1))


def write_bool(f: BinaryIO, val: bool):
    f.write(b"\x01" if val else b"\x00")
