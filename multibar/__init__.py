"""Terminal progress bar building blocks: fillers, bar state, options and a console writer."""

__version__ = "0.1.0"