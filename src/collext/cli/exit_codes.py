"""Process exit codes returned by ``collext`` commands.

:func:`collext.cli.app.cli` maps every outcome onto one of these:
printed results, a :class:`~collext.exceptions.CollextError` such as an
unreadable payload or a bad item format, Ctrl+C, or a crash.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command printed its result."""

GENERAL_ERROR: int = 1
"""A CollextError was reported, or ``pick`` had no items to choose from."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""
