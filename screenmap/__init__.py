"""screenmap: locate on-screen UI elements through OCR and drive the pointer to them."""

__version__ = "0.1.0"
