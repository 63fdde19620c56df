"""dirquest: a filesystem dungeon crawl engine."""
