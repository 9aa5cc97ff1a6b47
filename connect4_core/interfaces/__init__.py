"""
connect4_core.interfaces - Front ends that drive the engine

Only the terminal driver lives here; graphical front ends call the same
public API.
"""

# Don't import anything here to avoid circular imports
__all__ = []
