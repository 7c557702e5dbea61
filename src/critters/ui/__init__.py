"""Qt front end."""
