"""Review-count gate for GitHub pull requests: decision logic and GitHub glue."""
