"""
Shaderpad - Highlight Renderer
Turns a token list into HTML markup for an editor overlay
"""

from typing import Dict, Iterable
import html
import logging

from .lexer import Token, TokenKind, tokenize

logger = logging.getLogger("shaderpad")

DEFAULT_CLASS_PREFIX = 'token-'

# Default colour per token kind, keyed by kind name
THEME: Dict[str, str] = {
    'comment': '#6a737d',
    'string': '#032f62',
    'number': '#005cc5',
    'keyword': '#d73a49',
    'type': '#6f42c1',
    'builtin': '#e36209',
    'preprocessor': '#22863a',
    'operator': '#d73a49',
    'identifier': '#24292e',
    'punctuation': '#586069',
    'unknown': '#b31d28',
}

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
{css}
</style>
</head>
<body>
<pre class="code-editor-pre"><code class="code-editor-code">{markup}</code></pre>
</body>
</html>
"""

def escape_html(text: str) -> str:
    """Escape & < > " and ' for safe injection as HTML"""
    return html.escape(text, quote=True)


def kind_name(kind: TokenKind) -> str:
    return kind.name.lower()


def render(tokens: Iterable[Token], class_prefix: str = DEFAULT_CLASS_PREFIX) -> str:
    """
    Render tokens as markup.

    Whitespace is emitted escaped but unwrapped so the overlay stays aligned
    with the raw text; every other token becomes
    <span class="token-KIND">escaped text</span>. A trailing newline keeps
    the last line's box from collapsing.
    """
    parts = []
    for token in tokens:
        escaped = escape_html(token.text)
        if token.kind == TokenKind.WHITESPACE:
            parts.append(escaped)
        else:
            parts.append(f'<span class="{class_prefix}{kind_name(token.kind)}">{escaped}</span>')
    parts.append('\n')
    logger.debug("rendered %d tokens", len(parts) - 1)
    return ''.join(parts)


def highlight(source: str, class_prefix: str = DEFAULT_CLASS_PREFIX) -> str:
    """Tokenize and render in one call"""
    return render(tokenize(source), class_prefix)


def render_plain(source: str) -> str:
    """Fallback rendering with no highlighting: escaped text, newlines as <br />"""
    return escape_html(source).replace('\n', '<br />')


def stylesheet(class_prefix: str = DEFAULT_CLASS_PREFIX) -> str:
    rules = [f'.{class_prefix}{name} {{ color: {color}; }}' for name, color in THEME.items()]
    rules.append(f'.{class_prefix}comment {{ font-style: italic; }}')
    return '\n'.join(rules) + '\n'


def render_document(source: str, title: str = 'shader') -> str:
    """Standalone HTML page holding the highlighted source"""
    return DOCUMENT_TEMPLATE.format(
        title=escape_html(title),
        css=stylesheet(),
        markup=highlight(source),
    )
