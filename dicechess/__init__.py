"""Dice Chess: chess where three dice decide which piece types may move."""
