# PropertyTree reader and writer.
#
# Every node is a type byte, an "internal" flag byte that only matters to the game
# and is always written as false, then a payload depending on the type.

from .data import DataReader, DataWriter
from .errors import DatError, DepthLimitError, FormatSyntaxError, OutOfRangeError

# Deepest nesting accepted when reading, guards the recursion on hostile input.
MAX_DEPTH = 100

trees = [None for _ in range(6)]


# Generic base node, calls self.decodePayload with a DataReader to fill in payload.
class Tree:
  ID = None

  def __init__(self, payload=None, data=None, depth=0, max_depth=MAX_DEPTH):
    if data is not None:
      self.payload = self.decodePayload(data, depth, max_depth)
    else:
      self.payload = payload

  def decodePayload(self, data, depth, max_depth):
    raise NotImplementedError("Decode method not overridden by subclass.")

  def encodePayload(self, data):
    raise NotImplementedError("Encode method not overridden by subclass.")

  def encode(self, data):
    data.put_byte(self.ID)
    data.put_bool(False)
    self.encodePayload(data)

  def to_python(self):
    return self.payload

  def __eq__(self, other):
    return isinstance(other, Tree) and self.ID == other.ID and self.payload == other.payload

  def __repr__(self):
    return "{}:{!r}".format(self.__class__.__name__, self.payload)


class TreeNone(Tree):
  ID = 0

  def __init__(self, payload=None, data=None, depth=0, max_depth=MAX_DEPTH):
    super().__init__(None, data, depth, max_depth)

  def decodePayload(self, data, depth, max_depth):
    return None

  def encodePayload(self, data):
    pass
trees[0] = TreeNone


class TreeBool(Tree):
  ID = 1

  def decodePayload(self, data, depth, max_depth):
    return data.next_bool()

  def encodePayload(self, data):
    data.put_bool(self.payload)
trees[1] = TreeBool


class TreeNumber(Tree):
  ID = 2

  def decodePayload(self, data, depth, max_depth):
    return data.next_double()

  def encodePayload(self, data):
    data.put_double(self.payload)
trees[2] = TreeNumber


class TreeString(Tree):
  ID = 3

  def decodePayload(self, data, depth, max_depth):
    return data.next_string()

  def encodePayload(self, data):
    data.put_string(self.payload)
trees[3] = TreeString


# Every element carries a label string the game never fills in.
class TreeList(Tree):
  ID = 4

  def __init__(self, payload=None, data=None, depth=0, max_depth=MAX_DEPTH):
    super().__init__([] if payload is None else list(payload), data, depth, max_depth)

  def decodePayload(self, data, depth, max_depth):
    size = data.next_u32()
    payload = []
    for _ in range(size):
      data.next_string()
      payload.append(decode(data, depth + 1, max_depth))
    return payload

  def encodePayload(self, data):
    data.put_u32(len(self.payload))
    for item in self.payload:
      data.put_string("")
      item.encode(data)

  def add(self, tree):
    self.payload.append(tree)

  def __getitem__(self, idx):
    return self.payload[idx]

  def __len__(self):
    return len(self.payload)

  def __iter__(self):
    return iter(self.payload)

  def to_python(self):
    return [item.to_python() for item in self.payload]
trees[4] = TreeList


# Pairs are kept in the order they were read or added so re-encoding is byte stable.
class TreeDictionary(Tree):
  ID = 5

  def __init__(self, payload=None, data=None, depth=0, max_depth=MAX_DEPTH):
    super().__init__([], data, depth, max_depth)
    if data is None and payload is not None:
      for key, value in payload:
        self.add(key, value)

  def decodePayload(self, data, depth, max_depth):
    size = data.next_u32()
    payload = []
    seen = set()
    for _ in range(size):
      key = data.next_string()
      if key in seen:
        raise FormatSyntaxError("Duplicate dictionary key '{}'".format(key))
      seen.add(key)
      payload.append((key, decode(data, depth + 1, max_depth)))
    return payload

  def encodePayload(self, data):
    data.put_u32(len(self.payload))
    for key, value in self.payload:
      data.put_string(key)
      value.encode(data)

  def add(self, key, tree):
    if key in self:
      raise DatError("Duplicate dictionary key '{}'".format(key))
    self.payload.append((key, tree))

  def get(self, key, default=None):
    for name, value in self.payload:
      if name == key:
        return value
    return default

  def __getitem__(self, key):
    for name, value in self.payload:
      if name == key:
        return value
    raise KeyError("{} not found in {}".format(key, self.keys()))

  def __contains__(self, key):
    return any(name == key for name, _ in self.payload)

  def __len__(self):
    return len(self.payload)

  def keys(self):
    return [name for name, _ in self.payload]

  def items(self):
    return list(self.payload)

  def pop(self, key):
    for i in range(len(self.payload)):
      if self.payload[i][0] == key:
        return self.payload.pop(i)[1]
    return None

  def to_python(self):
    return {key: value.to_python() for key, value in self.payload}
trees[5] = TreeDictionary


def decode(data, depth=0, max_depth=MAX_DEPTH):
  if not isinstance(data, DataReader):
    data = DataReader(data)
  if depth > max_depth:
    raise DepthLimitError(max_depth)
  treeID = data.next_byte()
  if treeID >= len(trees):
    raise OutOfRangeError(treeID)
  data.next_bool()
  return trees[treeID](data=data, depth=depth, max_depth=max_depth)


def encode(toEncode, data=None):
  if data is None:
    data = DataWriter()
  toEncode.encode(data)
  return data.data


def from_python(value):
  if isinstance(value, Tree):
    return value
  if value is None:
    return TreeNone()
  if isinstance(value, bool):
    return TreeBool(value)
  if isinstance(value, (int, float)):
    return TreeNumber(float(value))
  if isinstance(value, str):
    return TreeString(value)
  if isinstance(value, dict):
    return TreeDictionary([(key, from_python(item)) for key, item in value.items()])
  if isinstance(value, (list, tuple)):
    return TreeList([from_python(item) for item in value])
  raise DatError("Cannot build a PropertyTree from {}".format(type(value).__name__))
