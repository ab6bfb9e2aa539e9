"""Cross-cutting pieces: settings, logging, errors, database, auth."""
