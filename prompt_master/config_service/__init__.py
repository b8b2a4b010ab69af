"""Engine defaults configuration service."""
