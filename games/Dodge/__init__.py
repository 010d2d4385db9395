"""Dodge - keep the red box away from the walls and the blue boxes."""
