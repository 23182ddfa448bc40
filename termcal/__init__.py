"""termcal - full-screen month calendar for the terminal with keyboard navigation."""

__version__ = "1.0.0"
__author__ = "termcal Team"
__email__ = "support@termcal.local"
__description__ = "Full-screen terminal month calendar with keyboard navigation"

# Package metadata
__all__ = [
    "__author__",
    "__description__",
    "__email__",
    "__version__",
]
