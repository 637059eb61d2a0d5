#!/usr/bin/env python3
"""
Shaderpad - Main Entry Point
Highlight GLSL files or interactive input as HTML markup
"""

from typing import Callable, List, Optional
import logging
import sys

from .lexer import tokenize
from .highlight import highlight, render_plain, render_document, stylesheet

VERSION = "0.1.0"

logger = logging.getLogger("shaderpad")

def format_tokens(source: str) -> str:
    """One token per line: KIND<TAB>repr(text)"""
    return ''.join(f"{token.kind.name}\t{token.text!r}\n" for token in tokenize(source))

def plain_output(source: str) -> str:
    return render_plain(source) + '\n'

def read_source(filepath: str) -> str:
    with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()

def run_file(filepath: str, output: Callable[[str], str]):
    """Highlight a shader source file to stdout"""
    try:
        source = read_source(filepath)
    except FileNotFoundError:
        print(f"Error: File not found: {filepath}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.debug("read %d chars from %s", len(source), filepath)
    sys.stdout.write(output(source))

def run_repl(output: Callable[[str], str]):
    """Interactive REPL: a blank line highlights the buffered lines"""
    print(f"Shaderpad {VERSION} - Blank line to highlight, 'exit' or Ctrl+D to quit")

    buffer: List[str] = []

    while True:
        try:
            prompt = "... " if buffer else ">>> "
            line = input(prompt)

            if line.strip() == "exit":
                break

            if line.strip():
                buffer.append(line)
                continue

            if not buffer:
                continue

            source = '\n'.join(buffer)
            buffer = []
            sys.stdout.write(output(source))

        except EOFError:
            print()
            if buffer:
                sys.stdout.write(output('\n'.join(buffer)))
            break
        except KeyboardInterrupt:
            print("\nInterrupted")
            buffer = []

def show_help():
    print(f"""Shaderpad {VERSION} - GLSL syntax highlighter

Usage:
  shaderpad [options] [file.glsl ...]   Highlight source files
  shaderpad [options]                   Start interactive REPL

Options:
  --tokens       Print the token stream instead of markup
  --plain        Escape only, no highlighting
  --page         Emit a complete HTML page per file
  --css          Print the default stylesheet
  --verbose      Enable debug logging
  -h, --help     Show this help
  -v, --version  Show version

Examples:
  shaderpad shader.frag               Print highlighted markup
  shaderpad --tokens shader.vert      List tokens
""")

def main(argv: Optional[List[str]] = None):
    args = sys.argv[1:] if argv is None else argv
    options = [a for a in args if a.startswith('-')]
    files = [a for a in args if not a.startswith('-')]

    known = {'--tokens', '--plain', '--page', '--css', '--verbose',
             '--help', '-h', '--version', '-v'}
    for option in options:
        if option not in known:
            print(f"Unknown option: {option}", file=sys.stderr)
            sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if '--verbose' in options else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if '--help' in options or '-h' in options:
        show_help()
        return
    if '--version' in options or '-v' in options:
        print(f"Shaderpad {VERSION}")
        return
    if '--css' in options:
        sys.stdout.write(stylesheet())
        return

    if '--tokens' in options:
        output = format_tokens
    elif '--plain' in options:
        output = plain_output
    elif '--page' in options:
        output = render_document
    else:
        output = highlight

    if not files:
        run_repl(output)
        return

    for filepath in files:
        run_file(filepath, output)

if __name__ == "__main__":
    main()
