"""
Application constants.

This module contains constants used throughout the application.
"""

# Decks a user without the unlimited-decks entitlement may own
FREE_DECK_LIMIT = 3

# Field limits shared by the domain value objects and the API schemas
MAX_DECK_NAME_LENGTH = 255
MAX_DECK_DESCRIPTION_LENGTH = 1000
MAX_CARD_SIDE_LENGTH = 1000

# Bounds for a single AI generation request
MIN_GENERATED_CARDS = 1
MAX_GENERATED_CARDS = 20

# Entitlement feature keys as issued by the billing provider
UNLIMITED_DECKS_FEATURE = "unlimited_decks"
AI_CARD_GENERATION_FEATURE = "ai_flashcard_generation"
