"""
Unscramble - Word Unscrambling Game Engine

A seedable, in-memory engine for a single-player word game. The engine provides:
- Word corpus loading and validation
- Non-repeating word selection and non-identity shuffling
- An observable game session state machine
- Ephemeral session management, an HTTP API and a terminal front end
"""

__version__ = "0.1.0"
