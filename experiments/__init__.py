"""Statistical quality experiments for slimrand generators."""
