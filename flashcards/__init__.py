"""
Flash card sheet maker modules.

This package turns pipe-delimited card lists into duplex-ready A4 sheets of
4x4 cards, with the back side mirrored for long-edge flipping.
"""

__version__ = "1.0.0"
