"""Alumni network API and global search client."""
