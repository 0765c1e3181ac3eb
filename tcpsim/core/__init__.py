"""TCP protocol identities."""
