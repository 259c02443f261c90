# Every failure raised while reading or writing a .dat buffer derives from DatError.


class DatError(Exception):
  def __init__(self, message=""):
    super().__init__(message)
    self.message = message

  def __str__(self):
    return self.message or self.__class__.__name__


# Raised by peek() at the end of the buffer. The ModSettings reader expects it.
class EofError(DatError):
  def __init__(self, message="unexpected end of buffer"):
    super().__init__(message)


class SlicingError(DatError):
  def __init__(self, wanted, remaining, idx):
    super().__init__("cannot read {} bytes at offset {}, only {} remaining".format(wanted, idx, remaining))
    self.wanted = wanted
    self.remaining = remaining
    self.idx = idx


class Utf8Error(DatError):
  def __init__(self, cause):
    super().__init__("invalid utf-8 in string: {}".format(cause))
    self.cause = cause


class OutOfRangeError(DatError):
  def __init__(self, value):
    super().__init__("unknown PropertyTree type {}".format(value))
    self.value = value


class FormatSyntaxError(DatError):
  pass


class DepthLimitError(FormatSyntaxError):
  def __init__(self, limit):
    super().__init__("PropertyTree nested deeper than {} levels".format(limit))
    self.limit = limit


class TrailingBytesError(DatError):
  def __init__(self, idx, remaining):
    super().__init__("{} trailing bytes after offset {}".format(remaining, idx))
    self.idx = idx
    self.remaining = remaining
