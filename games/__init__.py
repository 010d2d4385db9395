"""Games shipped with Pilot Lou."""
