#!/usr/bin/env python3
"""
Chat Markup - inline message formatter for persona chat transcripts

Simple usage:
    python markup.py message.txt                       # Styled terminal output
    python markup.py chat.json -o chat.html            # Transcript to HTML
    python markup.py --text "**hi** *there*" --json    # Structured fragments
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from chat_markup.cli import app

if __name__ == "__main__":
    app()
