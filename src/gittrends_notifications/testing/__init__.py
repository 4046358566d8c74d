"""Testing helpers – in-memory doubles for every notification port."""
