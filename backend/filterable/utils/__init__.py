from .text import camel

__all__ = ["camel"]
