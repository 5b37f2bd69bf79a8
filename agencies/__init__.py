"""Agency search and ranking."""
