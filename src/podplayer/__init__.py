"""podplayer - A podcast directory and player for the terminal."""

__title__ = "podplayer"
__description__ = "A podcast directory and player for the terminal"
__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "__description__",
    "__license__",
    "__title__",
    "__version__",
]
