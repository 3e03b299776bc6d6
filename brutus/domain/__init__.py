"""Password grading domain: rules, services and value objects."""
