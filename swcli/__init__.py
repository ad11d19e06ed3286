"""Standard flags, config objects, commands, a dispatcher and build metadata for command-line tools."""

__version__ = "0.1.0"