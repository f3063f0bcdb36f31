"""Built-in stemmer and speller engine backends."""
