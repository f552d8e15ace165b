"""CLI layer — argument parsing, prompts, rendering, and the error boundary.

This is the outermost layer and the only one that writes to the
terminal.  It may import from ``core``, ``infra``, and ``utils``; no
other layer may import from ``cli``.
"""
