"""
Shaderpad - GLSL Syntax Highlighting Package
"""

from .lexicon import KEYWORDS, TYPES, BUILTINS, is_keyword, is_type, is_builtin, classify_word
from .lexer import tokenize, Lexer, Token, TokenKind
from .highlight import render, highlight, render_plain, render_document, stylesheet, escape_html

__version__ = "0.1.0"
__all__ = [
    "KEYWORDS", "TYPES", "BUILTINS",
    "is_keyword", "is_type", "is_builtin", "classify_word",
    "tokenize", "Lexer", "Token", "TokenKind",
    "render", "highlight", "render_plain", "render_document",
    "stylesheet", "escape_html",
]
