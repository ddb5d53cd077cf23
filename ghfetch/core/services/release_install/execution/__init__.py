"""
L4 Execution — functions that WRITE to the system.

Downloads, archive extraction, file installs and subprocess calls.
Import from the individual modules; detection builds on the runner
here, so this package re-exports nothing.
"""
