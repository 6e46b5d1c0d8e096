"""Countdown domain models.

The ``timer`` subpackage holds the clock, the interactive session state
machine and its terminal front end.
"""
