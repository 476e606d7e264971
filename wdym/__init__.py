"""wdym (What Do You Mean?) - AI-powered command-line assistant."""

__version__ = "0.1.0"

# Invocations of this tool are skipped when reading shell history.
TOOL_NAME = "wdym"
