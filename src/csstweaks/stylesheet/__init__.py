from csstweaks.stylesheet.model import CssRule
from csstweaks.stylesheet.parser import import_css, parse_rules
from csstweaks.stylesheet.report import render_report
from csstweaks.stylesheet.synthesizer import build, render_rule

__all__ = ["CssRule", "build", "import_css", "parse_rules", "render_report", "render_rule"]
