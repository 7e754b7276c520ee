"""flashdeck: user-owned flashcard decks and study sessions."""
