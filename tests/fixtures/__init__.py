"""Test fixtures for eventcal.

- core: factories, constants and pytest fixtures for events and calendars
"""
