"""Day planner backend: schedules a user's tasks into the free time of their day."""
