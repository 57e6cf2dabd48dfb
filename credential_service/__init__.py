"""Session credential issuing and verification."""
