import numpy as np

from .errors import DatError

# Full game version as stored on disk: four little-endian u16 in a row.
VERSION_DTYPE = np.dtype([("main", "<u2"), ("major", "<u2"), ("minor", "<u2"), ("developer", "<u2")])

# Saves written by this major version and later use 32 bit build numbers.
WIDE_BUILD_MAIN = 2


def _check_u16(*parts):
  for part in parts:
    if not 0 <= part <= 0xFFFF:
      raise DatError("version component {} does not fit in 16 bits".format(part))


class Version:
  def __init__(self, main, major, minor, developer=0):
    _check_u16(main, major, minor, developer)
    self.main = int(main)
    self.major = int(major)
    self.minor = int(minor)
    self.developer = int(developer)

  @classmethod
  def decode(cls, data):
    record = np.frombuffer(data.take(VERSION_DTYPE.itemsize), dtype=VERSION_DTYPE)[0]
    return cls(*(int(record[name]) for name in VERSION_DTYPE.names))

  def encode(self, data):
    record = np.array([self.astuple()], dtype=VERSION_DTYPE)
    data.put_raw(record.tobytes())

  def pack(self):
    return self.main << 48 | self.major << 32 | self.minor << 16 | self.developer

  @classmethod
  def unpack(cls, packed):
    if not 0 <= packed <= 0xFFFFFFFFFFFFFFFF:
      raise DatError("packed version {} does not fit in 64 bits".format(packed))
    return cls(packed >> 48 & 0xFFFF, packed >> 32 & 0xFFFF, packed >> 16 & 0xFFFF, packed & 0xFFFF)

  @classmethod
  def parse(cls, text):
    parts = text.split(".")
    if not 3 <= len(parts) <= 4:
      raise DatError("malformed version string {!r}".format(text))
    try:
      return cls(*(int(part) for part in parts))
    except ValueError:
      raise DatError("malformed version string {!r}".format(text)) from None

  def astuple(self):
    return (self.main, self.major, self.minor, self.developer)

  def __eq__(self, other):
    return isinstance(other, Version) and self.astuple() == other.astuple()

  def __lt__(self, other):
    return self.astuple() < other.astuple()

  def __le__(self, other):
    return self.astuple() <= other.astuple()

  def __hash__(self):
    return hash(self.astuple())

  def __str__(self):
    return "{}.{}.{}.{}".format(*self.astuple())

  def __repr__(self):
    return "Version({}, {}, {}, {})".format(*self.astuple())


# Per-mod version: three space optimized components, no developer part.
class Version48:
  def __init__(self, main, major, minor):
    _check_u16(main, major, minor)
    self.main = main
    self.major = major
    self.minor = minor

  @classmethod
  def decode(cls, data):
    return cls(data.next_u16_optim(), data.next_u16_optim(), data.next_u16_optim())

  def astuple(self):
    return (self.main, self.major, self.minor)

  def __eq__(self, other):
    return isinstance(other, Version48) and self.astuple() == other.astuple()

  def __hash__(self):
    return hash(self.astuple())

  def __str__(self):
    return "{}.{}.{}".format(*self.astuple())

  def __repr__(self):
    return "Version48({}, {}, {})".format(*self.astuple())


# Width is decided by the enclosing record's game version, never by the stream.
class BuildNumber:
  WIDTH = None

  def __init__(self, value):
    self.value = value

  @staticmethod
  def decode(data, version):
    if version.main >= WIDE_BUILD_MAIN:
      return Build32(data.next_u32())
    return Build16(data.next_u16())

  def __eq__(self, other):
    return type(self) is type(other) and self.value == other.value

  def __hash__(self):
    return hash((self.WIDTH, self.value))

  def __int__(self):
    return self.value

  def __str__(self):
    return str(self.value)

  def __repr__(self):
    return "{}({})".format(self.__class__.__name__, self.value)


class Build16(BuildNumber):
  WIDTH = 16


class Build32(BuildNumber):
  WIDTH = 32
