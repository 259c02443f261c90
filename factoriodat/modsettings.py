# mod-settings.dat: game version, a false sentinel, then one dictionary holding the three setting sections.

import logging

from . import tree
from .data import DataReader, DataWriter
from .errors import EofError, FormatSyntaxError, TrailingBytesError
from .version import Version

log = logging.getLogger(__name__)

# Written in this order, whatever order they were read in.
SECTIONS = ("startup", "runtime-global", "runtime-per-user")


class ModSettings:
  def __init__(self, version, startup=None, runtime_global=None, runtime_per_user=None):
    if isinstance(version, int):
      version = Version.unpack(version)
    self.version = version
    self.startup = startup if startup is not None else tree.TreeDictionary()
    self.runtime_global = runtime_global if runtime_global is not None else tree.TreeDictionary()
    self.runtime_per_user = runtime_per_user if runtime_per_user is not None else tree.TreeDictionary()

  def sections(self):
    return [("startup", self.startup), ("runtime-global", self.runtime_global), ("runtime-per-user", self.runtime_per_user)]

  def to_python(self):
    settings = {"version": str(self.version)}
    for name, section in self.sections():
      settings[name] = section.to_python()
    return settings

  @classmethod
  def from_python(cls, settings):
    return cls(Version.parse(settings["version"]), *(tree.from_python(settings.get(name, {})) for name in SECTIONS))

  def __eq__(self, other):
    return isinstance(other, ModSettings) and self.version == other.version and self.sections() == other.sections()

  def __repr__(self):
    return "ModSettings({}, {})".format(self.version, self.sections())


def decode_mod_settings(data, max_depth=tree.MAX_DEPTH):
  data = DataReader(data)
  version = Version.decode(data)
  log.debug("mod settings written by %s", version)

  if data.next_bool():
    raise FormatSyntaxError("After-version sentinel expected to be false, got true")

  top = tree.decode(data, max_depth=max_depth)
  if not isinstance(top, tree.TreeDictionary):
    raise FormatSyntaxError("Top-level PropertyTree not dictionary type")
  sections = []
  for name in SECTIONS:
    if name not in top:
      raise FormatSyntaxError("Settings section '{}' missing".format(name))
    sections.append(top.pop(name))
  if len(top):
    log.debug("ignoring extra top-level sections %s", top.keys())

  try:
    data.peek()
  except EofError:
    return ModSettings(version, *sections)
  raise TrailingBytesError(data.idx, data.remaining)


def encode_mod_settings(settings):
  data = DataWriter()
  settings.version.encode(data)
  data.put_bool(False)
  tree.TreeDictionary(settings.sections()).encode(data)
  return data.data
