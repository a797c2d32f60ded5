"""Headless game models: platformer physics, particle emitter configuration, arcade game logic and UI state."""

__version__ = "0.1.0"