"""Invoke tasks for android-signing."""
