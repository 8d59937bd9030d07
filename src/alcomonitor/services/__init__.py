"""Services layer: readings, leaderboard state and configuration."""
