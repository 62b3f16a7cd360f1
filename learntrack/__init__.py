"""AI Learning Tracker - Track progress through AI coding resources."""
