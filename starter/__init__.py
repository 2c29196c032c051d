"""Project Starter -- generates a Spring Boot service skeleton from templates."""

__version__ = "0.1.0"
