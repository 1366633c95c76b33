"""Core building blocks: errors, responses, formatting and the publisher facade."""
