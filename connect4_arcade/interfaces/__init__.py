"""
connect4_arcade.interfaces - User interfaces for the Connect Four engine

Don't import anything here to avoid pulling the CLI into library users.
"""

__all__ = []
