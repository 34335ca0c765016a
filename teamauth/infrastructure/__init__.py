"""Infrastructure: cache, persistence, security, messaging and service implementations."""
