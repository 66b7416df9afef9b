from csstweaks.transforms.base import StylesheetSink
from csstweaks.transforms.variables import TOKENS, UNIT_TABLE, Unit, format_value, resolve

__all__ = ["StylesheetSink", "TOKENS", "UNIT_TABLE", "Unit", "format_value", "resolve"]
