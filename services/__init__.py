"""Log classification, file reading and terminal rendering."""
