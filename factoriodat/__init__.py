import logging

from . import tree
from .data import DataReader, DataWriter
from .errors import (DatError, DepthLimitError, EofError, FormatSyntaxError, OutOfRangeError, SlicingError,
                     TrailingBytesError, Utf8Error)
from .modsettings import ModSettings, decode_mod_settings, encode_mod_settings
from .saveheader import SaveHeader, SaveHeaderMod, decode_save_header
from .tree import TreeBool, TreeDictionary, TreeList, TreeNone, TreeNumber, TreeString
from .version import Build16, Build32, BuildNumber, Version, Version48

logging.getLogger(__name__).addHandler(logging.NullHandler())
