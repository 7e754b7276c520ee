"""
Learning bounded context - Domain layer.

This context handles flashcard-based learning features:
- Deck and card management
- Deck quota policy for non-entitled users
- In-memory study sessions over a deck's cards

Aggregates:
- Deck: Owned by one user, the consistency boundary for its cards
"""
