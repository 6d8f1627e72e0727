"""Domain: mnemonics and business exceptions (no infrastructure imports)."""
