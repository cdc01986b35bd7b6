"""Little Fridge backend."""
