"""Embedded-systems building blocks: buffers, pools, queues, events and timers."""

__version__ = "0.1.0"