"""Shift Check-in System package.

This package is organized by feature modules (shifts, schedules, checkins,
streaks, ...) with a thin Flask controller layer and service/repository layers.
"""
