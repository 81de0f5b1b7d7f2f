"""Editor state building blocks: tabs, text buffers with history, commands, shortcuts, settings and a file tree."""

__version__ = "0.23.0"