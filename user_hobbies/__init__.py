"""User hobbies backend: users own a list of hobbies stored in MongoDB."""
