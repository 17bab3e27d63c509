"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) that concrete collaborators satisfy.
- Lets the core depend on abstractions instead of a specific RNG.
"""
