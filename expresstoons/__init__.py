"""ExpressToons - cartoon generation and image editing on top of Gemini."""

__version__ = "0.1.0"
