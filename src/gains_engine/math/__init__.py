"""Pure numeric helpers: leveling curve, strength estimates, volume analytics."""
