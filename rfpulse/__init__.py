"""Decoders and encoders for 433 MHz RF sensor, doorbell and remote pulse trains."""

__version__ = "0.1.0"