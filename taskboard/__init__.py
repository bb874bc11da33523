"""taskboard - post a task, receive offers."""
