"""Pipeline stages for the Vigenère frequency attack."""
