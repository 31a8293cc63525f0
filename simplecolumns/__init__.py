# simplecolumns/__init__.py
"""Side-by-side column blocks for pandoc-rendered markdown."""

__version__ = "1.2.0"
