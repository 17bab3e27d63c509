"""Domain models and constants.

Why:
- Pure, strict data structures (Pydantic v2) for the password model.
- The domain knows nothing about the CLI, the clipboard or the terminal.
"""
