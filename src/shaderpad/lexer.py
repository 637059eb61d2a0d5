"""
Shaderpad - GLSL Lexer
Single-pass tokenization by ordered, anchored pattern dispatch
"""

from enum import IntEnum, auto
from dataclasses import dataclass
from typing import List, Tuple
import logging
import re

from .lexicon import classify_word

logger = logging.getLogger("shaderpad")

class TokenKind(IntEnum):
    WHITESPACE = auto()
    COMMENT = auto()
    STRING = auto()
    NUMBER = auto()
    KEYWORD = auto()
    TYPE = auto()
    BUILTIN = auto()
    PREPROCESSOR = auto()
    OPERATOR = auto()
    IDENTIFIER = auto()
    PUNCTUATION = auto()
    UNKNOWN = auto()

@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str

    def __repr__(self):
        return f"Token({self.kind.name}, {self.text!r})"

# Priority order matters: the first pattern matching at the scan position wins.
# Unterminated block comments and strings run to end of input.
PATTERNS: Tuple[Tuple[TokenKind, re.Pattern], ...] = (
    (TokenKind.COMMENT, re.compile(r'/\*[\s\S]*?(?:\*/|\Z)|//[^\n]*')),
    (TokenKind.STRING, re.compile(r'"(?:\\[\s\S]|[^"\\])*(?:"|\\?\Z)')),
    (TokenKind.PREPROCESSOR, re.compile(r'#[^\n]*')),
    (TokenKind.NUMBER, re.compile(r'[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?[uUfF]?')),
    (TokenKind.IDENTIFIER, re.compile(r'[A-Za-z_][A-Za-z0-9_]*')),
    (TokenKind.WHITESPACE, re.compile(r'[ \t\n\r\f\v]+')),
    (TokenKind.OPERATOR, re.compile(r'[+\-*/%=&|^!<>]=?|[?:]')),
    (TokenKind.PUNCTUATION, re.compile(r'[;,()\[\]{}.]')),
    (TokenKind.UNKNOWN, re.compile(r'[\s\S]')),
)

class Lexer:
    """Lossless lexer: the token texts concatenate back to the source"""

    __slots__ = ('source', 'pos', 'length')

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.length = len(source)

    def at_end(self) -> bool:
        return self.pos >= self.length

    def next_token(self) -> Token:
        """Match the next token at the current position and advance past it"""
        for kind, pattern in PATTERNS:
            match = pattern.match(self.source, self.pos)
            # A zero-length match would never advance; try the next pattern.
            if match is None or match.end() == self.pos:
                continue
            text = match.group()
            if kind == TokenKind.IDENTIFIER:
                kind = TokenKind[classify_word(text).upper()]
            self.pos = match.end()
            return Token(kind, text)

        # Only reachable if the fallback pattern is removed from PATTERNS.
        text = self.source[self.pos]
        self.pos += 1
        return Token(TokenKind.UNKNOWN, text)

    def tokenize(self) -> List[Token]:
        """Tokenize the remaining source into a list"""
        tokens = []
        while not self.at_end():
            tokens.append(self.next_token())
        logger.debug("tokenized %d chars into %d tokens", self.length, len(tokens))
        return tokens


def tokenize(source: str) -> List[Token]:
    """Convenience function to tokenize shader source"""
    return Lexer(source).tokenize()
