import pytest

from factoriodat import tree
from factoriodat.data import DataWriter
from factoriodat.errors import EofError, FormatSyntaxError, SlicingError, TrailingBytesError
from factoriodat.modsettings import ModSettings, decode_mod_settings, encode_mod_settings
from factoriodat.tree import TreeBool, TreeDictionary, TreeNumber, TreeString
from factoriodat.version import Version

VERSION_BYTES = b"\x01\x00\x01\x00\x6e\x00\x00\x00"


def _setting(value):
  return TreeDictionary([("value", value)])


def _build(sections, sentinel=False, trailing=b""):
  writer = DataWriter()
  writer.put_raw(VERSION_BYTES)
  writer.put_bool(sentinel)
  TreeDictionary(sections).encode(writer)
  writer.put_raw(trailing)
  return writer.data


def _game_order():
  # Section order as the game wrote it, not the order written back.
  return [
      ("runtime-per-user", TreeDictionary([("show-hints", _setting(TreeBool(True)))])),
      ("startup", TreeDictionary([
          ("ore-richness", _setting(TreeNumber(1.5))),
          ("mode", _setting(TreeString("x" * 300))),
      ])),
      ("runtime-global", TreeDictionary()),
  ]


def test_decode_sections() -> None:
  settings = decode_mod_settings(_build(_game_order()))
  assert settings.version == Version(1, 1, 110, 0)
  assert settings.startup["ore-richness"]["value"] == TreeNumber(1.5)
  assert settings.runtime_global == TreeDictionary()
  assert settings.runtime_per_user.keys() == ["show-hints"]


def test_encode_layout() -> None:
  settings = ModSettings(Version(1, 1, 110, 0))
  encoded = encode_mod_settings(settings)
  assert encoded[:8] == VERSION_BYTES
  assert encoded[8:9] == b"\x00"
  top = tree.decode(encoded[9:])
  assert top.keys() == ["startup", "runtime-global", "runtime-per-user"]


def test_round_trip_is_stable() -> None:
  original = _build(_game_order() + [("unknown-section", TreeDictionary())])
  first = decode_mod_settings(original)
  encoded = encode_mod_settings(first)
  second = decode_mod_settings(encoded)
  assert second == first
  assert encode_mod_settings(second) == encoded


def test_missing_section_is_named() -> None:
  sections = [pair for pair in _game_order() if pair[0] != "runtime-per-user"]
  with pytest.raises(FormatSyntaxError) as exc:
    decode_mod_settings(_build(sections))
  assert "runtime-per-user" in str(exc.value)


def test_sentinel_must_be_false() -> None:
  with pytest.raises(FormatSyntaxError):
    decode_mod_settings(_build(_game_order(), sentinel=True))


def test_top_level_must_be_dictionary() -> None:
  data = VERSION_BYTES + b"\x00" + tree.encode(TreeString("startup"))
  with pytest.raises(FormatSyntaxError):
    decode_mod_settings(data)


def test_trailing_byte_is_rejected() -> None:
  with pytest.raises(TrailingBytesError):
    decode_mod_settings(_build(_game_order(), trailing=b"\x00"))


def test_truncated_buffer_fails_cleanly() -> None:
  data = _build(_game_order())
  for end in range(len(data)):
    with pytest.raises((SlicingError, EofError)):
      decode_mod_settings(data[:end])


def test_packed_version() -> None:
  settings = ModSettings(0x00010001006E0000)
  assert settings.version == Version(1, 1, 110, 0)
  assert encode_mod_settings(settings)[:8] == VERSION_BYTES


def test_python_conversion() -> None:
  settings = decode_mod_settings(_build(_game_order()))
  value = settings.to_python()
  assert value["version"] == "1.1.110.0"
  assert value["runtime-per-user"] == {"show-hints": {"value": True}}
  assert ModSettings.from_python(value) == settings


def test_deep_section_within_limit_decodes() -> None:
  nested = TreeDictionary()
  # The startup section itself sits one level below the top dictionary.
  for _ in range(tree.MAX_DEPTH - 2):
    nested = TreeDictionary([("inner", nested)])
  settings = ModSettings(Version(1, 1, 110, 0), startup=nested)
  assert decode_mod_settings(encode_mod_settings(settings)) == settings


def test_non_bytes_input_is_a_type_error() -> None:
  with pytest.raises(TypeError):
    decode_mod_settings(20)
