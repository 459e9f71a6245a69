"""Brickfolio: explore a personal LEGO set collection.

Loads a static ``sets.json`` export once per session and answers
filter, sort, suggestion and theme-rollup queries over it in memory.
"""

__version__ = "0.1.0"
