"""Raindrop Analytics — region sampling and raindrop mark statistics."""
