"""MoodCheck backend: wellbeing reflections, reviews and admin statistics."""
