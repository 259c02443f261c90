# Header at the start of level-init.dat and level.dat0. Read only.

import logging

from .data import DataReader
from .version import WIDE_BUILD_MAIN, BuildNumber, Version, Version48

log = logging.getLogger(__name__)

# 2.0 saves carry this many unexplained bytes after allowed_commands, always 00 00 A0 00 so far.
RESERVED_SIZE = 4


class SaveHeaderMod:
  def __init__(self, name, version, crc):
    self.name = name
    self.version = version
    self.crc = crc

  @classmethod
  def decode(cls, data):
    return cls(data.next_string_saveheader(), Version48.decode(data), data.next_u32())

  def to_python(self):
    return {"name": self.name, "version": str(self.version), "crc": self.crc}

  def __eq__(self, other):
    return isinstance(other, SaveHeaderMod) and (self.name, self.version, self.crc) == (other.name, other.version, other.crc)

  def __str__(self):
    return "{} {}".format(self.name, self.version)

  def __repr__(self):
    return "SaveHeaderMod({!r}, {!r}, {:#010x})".format(self.name, self.version, self.crc)


class SaveHeader:
  fields = ("factorio_version", "campaign", "name", "base_mod", "difficulty", "finished", "player_won",
            "next_level", "can_continue", "finished_but_continuing", "saving_replay",
            "allow_non_admin_debug_options", "loaded_from", "loaded_from_build", "allowed_commands",
            "reserved", "mods")

  def __init__(self, **values):
    missing = [name for name in self.fields if name not in values and name != "reserved"]
    if missing:
      raise TypeError("SaveHeader missing fields: {}".format(", ".join(missing)))
    unknown = [name for name in values if name not in self.fields]
    if unknown:
      raise TypeError("SaveHeader got unknown fields: {}".format(", ".join(unknown)))
    values.setdefault("reserved", b"")
    for name in self.fields:
      setattr(self, name, values[name])

  def to_python(self):
    header = {}
    for name in self.fields:
      value = getattr(self, name)
      if isinstance(value, (Version, Version48)):
        value = str(value)
      elif name == "loaded_from_build":
        value = int(value)
      elif name == "reserved":
        value = value.hex()
      elif name == "mods":
        value = [mod.to_python() for mod in value]
      header[name] = value
    return header

  def __eq__(self, other):
    return isinstance(other, SaveHeader) and all(getattr(self, name) == getattr(other, name) for name in self.fields)

  def __repr__(self):
    return "SaveHeader({} {!r}/{!r}, {} mods)".format(self.factorio_version, self.campaign, self.name, len(self.mods))


def decode_save_header(data):
  data = DataReader(data)
  values = {}
  factorio_version = values["factorio_version"] = Version.decode(data)
  wide = factorio_version.main >= WIDE_BUILD_MAIN
  log.debug("save header written by %s, %s build number", factorio_version, "32 bit" if wide else "16 bit")

  # Unused
  data.next_bool()

  values["campaign"] = data.next_string_saveheader()
  values["name"] = data.next_string_saveheader()
  values["base_mod"] = data.next_string_saveheader()
  values["difficulty"] = data.next_byte()
  values["finished"] = data.next_bool()
  values["player_won"] = data.next_bool()
  values["next_level"] = data.next_string_saveheader()
  values["can_continue"] = data.next_bool()
  values["finished_but_continuing"] = data.next_bool()
  values["saving_replay"] = data.next_bool()
  values["allow_non_admin_debug_options"] = data.next_bool()
  values["loaded_from"] = Version48.decode(data)
  values["loaded_from_build"] = BuildNumber.decode(data, factorio_version)
  values["allowed_commands"] = data.next_bool()
  values["reserved"] = data.take(RESERVED_SIZE) if wide else b""

  size = data.next_u32_optim()
  log.debug("save header lists %d mods", size)
  values["mods"] = [SaveHeaderMod.decode(data) for _ in range(size)]
  return SaveHeader(**values)
