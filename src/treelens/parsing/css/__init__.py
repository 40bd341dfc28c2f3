from .parser import CssDeclaration, CssRoot, CssRule, parse_css, parse_declarations

__all__ = ["CssDeclaration", "CssRoot", "CssRule", "parse_css", "parse_declarations"]
