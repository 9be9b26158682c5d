"""flashdeck: flashcard decks with ownership, plan quotas and AI card generation."""
