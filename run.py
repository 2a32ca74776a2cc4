# -*- coding: utf-8 -*-

"""
Main entry point for launching the xmind-outline command line.
"""

from xmind_outline.cli import main

if __name__ == '__main__':
    main()
