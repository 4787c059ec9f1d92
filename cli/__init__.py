"""Command-line helpers for the Sticky Prompts launcher."""
