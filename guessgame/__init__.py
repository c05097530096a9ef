"""guessgame — beginner console games.

Guess a secret number between 1 and 100, optionally in challenge mode with
only five attempts, or work out the area of a rectangle.

Usage:
    python -m guessgame              # Guess the number
    python -m guessgame rectangle    # Rectangle area
    python -m guessgame list         # Show games
"""
