"""Remote shell MCP: run shell commands on remote machines over SSH."""

__version__ = "0.1.0"
