"""Application layer – notification coordination, sorting state, app lifecycle."""
