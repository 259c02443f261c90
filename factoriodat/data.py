# Sequential little-endian reading and writing of the primitives .dat files are built from.

import struct

from .errors import DatError, EofError, SlicingError, Utf8Error

# A leading byte of this value means the full width integer follows.
OPTIM_SENTINEL = 0xFF

_formats = {1: "B", 2: "H", 4: "I", 8: "d"}
_limits = {1: 0xFF, 2: 0xFFFF, 4: 0xFFFFFFFF}


class DataReader:
  def __init__(self, data):
    # Only bytes-like input, an int would otherwise become a zero filled buffer.
    self.data = memoryview(data).tobytes()
    self.idx = 0

  @property
  def remaining(self):
    return len(self.data) - self.idx

  def take(self, size):
    if size > self.remaining:
      raise SlicingError(size, self.remaining, self.idx)
    taken = self.data[self.idx:self.idx + size]
    self.idx += size
    return taken

  def pop(self, size):
    return struct.unpack("<{}".format(_formats[size]), self.take(size))[0]

  def peek(self):
    if self.idx >= len(self.data):
      raise EofError()
    return self.data[self.idx]

  def finished(self):
    return self.idx >= len(self.data)

  def next_byte(self):
    byte = self.peek()
    self.idx += 1
    return byte

  def next_u16(self):
    return self.pop(2)

  def next_u32(self):
    return self.pop(4)

  def next_double(self):
    return self.pop(8)

  # Only exactly 1 counts as true.
  def next_bool(self):
    return self.next_byte() == 1

  def next_u16_optim(self):
    byte = self.next_byte()
    if byte != OPTIM_SENTINEL:
      return byte
    return self.next_u16()

  def next_u32_optim(self):
    byte = self.next_byte()
    if byte != OPTIM_SENTINEL:
      return byte
    return self.next_u32()

  def _string(self):
    size = self.next_u32_optim()
    raw = self.take(size)
    try:
      return raw.decode("utf-8")
    except UnicodeDecodeError as e:
      raise Utf8Error(e) from e

  # Property tree strings carry a leading "is empty" flag.
  def next_string(self):
    if self.next_bool():
      return ""
    return self._string()

  def next_string_saveheader(self):
    return self._string()

  def __repr__(self):
    return "DataReader({}/{})".format(self.idx, len(self.data))


class DataWriter:
  def __init__(self):
    self.buf = bytearray()

  @property
  def data(self):
    return bytes(self.buf)

  def put(self, size, value):
    if size in _limits and not 0 <= value <= _limits[size]:
      raise DatError("{} does not fit in {} bytes".format(value, size))
    self.buf += struct.pack("<{}".format(_formats[size]), value)

  def put_raw(self, raw):
    self.buf += raw

  def put_byte(self, value):
    self.put(1, value)

  def put_u16(self, value):
    self.put(2, value)

  def put_u32(self, value):
    self.put(4, value)

  def put_double(self, value):
    self.put(8, float(value))

  def put_bool(self, value):
    self.put(1, 1 if value else 0)

  def put_u32_optim(self, value):
    if 0 <= value < OPTIM_SENTINEL:
      self.put(1, value)
    else:
      self.put(1, OPTIM_SENTINEL)
      self.put(4, value)

  def _string(self, string):
    if not isinstance(string, str):
      raise DatError("expected a string, got {}".format(type(string).__name__))
    raw = string.encode("utf-8")
    self.put_u32_optim(len(raw))
    self.put_raw(raw)

  def put_string(self, string):
    if string == "":
      self.put_bool(True)
      return
    self.put_bool(False)
    self._string(string)

  def put_string_saveheader(self, string):
    self._string(string)

  def __len__(self):
    return len(self.buf)

  def __repr__(self):
    return "DataWriter({})".format(len(self.buf))
