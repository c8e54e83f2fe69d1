#!/usr/bin/env python3
"""
Console output for rendered definitions
Handles UTF-8 console setup and paging through an external pager
"""

import logging
import os
import shlex
import shutil
import subprocess
import sys
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)


def setup_console():
    """
    Make sure umlauts and escape sequences survive the Windows console
    """
    if sys.platform.startswith('win'):
        if hasattr(sys.stdout, 'reconfigure'):
            sys.stdout.reconfigure(encoding='utf-8', errors='replace')
            sys.stderr.reconfigure(encoding='utf-8', errors='replace')
        # Enables ANSI escape processing on Windows 10+
        os.system('')


def _less_prompt(title: str) -> str:
    # less treats these characters as prompt syntax
    escaped = ''.join('\\' + ch if ch in '\\?:.%' else ch for ch in title)
    return f"-P{escaped}"


def pager_command(pager: str, title: str) -> Optional[List[str]]:
    """Build the pager invocation, or None when the pager is not installed"""
    argv = shlex.split(pager)
    if not argv or shutil.which(argv[0]) is None:
        return None
    if os.path.basename(argv[0]) == 'less':
        # -R keeps the bold title, -F quits when the text fits on one screen
        argv += ['-R', '-F', _less_prompt(title)]
    return argv


def show(text: str, title: str, use_pager: bool = True, pager: str = 'less',
         stream: Optional[TextIO] = None):
    """Hand a rendered definition to the pager, or copy it to the console"""
    stream = stream or sys.stdout

    command = None
    if use_pager and stream.isatty():
        command = pager_command(pager, title)
        if command is None:
            logger.info(f"Pager '{pager}' not available, printing to console")

    if command is None:
        stream.write(text)
        stream.flush()
        return

    logger.debug(f"Paging through {' '.join(command)}")
    try:
        subprocess.run(command, input=text, text=True, encoding='utf-8', check=False)
    except OSError as e:
        logger.warning(f"Pager failed ({e}), printing to console")
        stream.write(text)
        stream.flush()
