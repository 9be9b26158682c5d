"""Deck and card application use cases."""
