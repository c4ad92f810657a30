"""Qt desktop front end."""
