"""Configuration, logging, errors and worker pool for argon2phc."""
