"""Random file picker for pasted cloud-storage listings."""

__version__ = "0.1.0"
