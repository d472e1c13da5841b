"""Draw the heading structure of Markdown documents as text mind maps."""

__version__ = "0.1.0"
__all__ = ["__version__"]