"""Game services operating on GameState."""
