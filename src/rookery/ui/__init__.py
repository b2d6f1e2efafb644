"""PyQt6 collaborators: paint game state and forward clicks as intents."""
