"""Reorder a mutable sequence in place by a validated permutation index."""

__version__ = "0.1.12"
__all__ = ["permute"]