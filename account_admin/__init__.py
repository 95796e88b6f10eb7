"""Account administration service package."""
