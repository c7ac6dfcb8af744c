"""berlinclock — Berlin Clock (Mengenlehreuhr) encoder, decoder and lamp editor."""

__version__ = "0.1.0"
