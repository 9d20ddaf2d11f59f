"""
flappy_term: A Flappy Bird style arcade game on a grid of character cells.
"""

__version__ = "0.1.0"
