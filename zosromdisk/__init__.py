"""Zeal 8-bit OS romdisk image packing and models of the OS user-space interfaces."""

__version__ = "0.1.0"